"""CLI handler for ``palawija install``."""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

from constants import ExitCodes

logger = logging.getLogger(__name__)


def compilation_instructions(source_dir: Path) -> str:
    """Step-by-step build instructions for an extracted source tree."""
    return textwrap.dedent(f"""\
        Compilation instructions:
          1. Navigate to the source directory:
               cd {source_dir}
          2. Configure the build:
               ./configure \\
                 --prefix={source_dir} \\
                 --with-config-file-path={source_dir}/etc \\
                 --enable-mbstring \\
                 --enable-zip \\
                 --with-curl \\
                 --with-openssl \\
                 --with-zlib \\
                 --enable-soap
          3. Compile (this may take 10-30 minutes):
               make -j$(nproc)
          4. Install:
               make install

        You may need development packages first:
          Ubuntu/Debian: sudo apt-get install build-essential libxml2-dev libssl-dev libcurl4-openssl-dev
          CentOS/RHEL/Fedora: sudo yum install gcc libxml2-devel openssl-devel curl-devel
        """)


def run_install(args, ctx) -> ExitCodes:
    """Download and extract the requested version."""
    version = args.version
    logger.info("Target PHP version: %s", version)
    result = ctx.installer.install(version)

    if result.already_installed:
        print(f"PHP version {version} is already downloaded.")
        print(f"Location: {result.path}")
        if result.has_binary:
            print("Binary found - ready to use!")
            print(f"To use this version: palawija use {version}")
        else:
            print("Source code only - compilation required.")
            print()
            print(compilation_instructions(result.path))
        return ExitCodes.SUCCESS

    print(f"Source code extracted to: {result.path}")
    print()
    print(compilation_instructions(result.path))
    print(f"PHP {version} source code is ready for compilation.")
    print(f"After a successful build, run: palawija use {version}")
    return ExitCodes.SUCCESS
