"""PHP version models and release catalog parsing."""
