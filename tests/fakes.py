"""Test doubles for the system interface."""

import io
import os
import tarfile
from pathlib import Path

from common.system import LocalSystem, ProbeResult
from errors import NetworkFailure


def make_tarball(version, files=None):
    """Build an in-memory php.net style tarball: a single php-<version>/ root."""
    files = files or {
        "configure": "#!/bin/sh\necho configure\n",
        "README.md": f"PHP {version}\n",
        "main/php.h": "/* header */\n",
    }
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        top = tarfile.TarInfo(f"php-{version}")
        top.type = tarfile.DIRTYPE
        top.mode = 0o755
        tar.addfile(top)
        for name, content in files.items():
            data = content.encode("utf-8")
            info = tarfile.TarInfo(f"php-{version}/{name}")
            info.size = len(data)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


def place_binary(install_path, relpath=("bin", "php")):
    """Simulate an out-of-band build by dropping an executable in place."""
    binary = Path(install_path).joinpath(*relpath)
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_text("#!/bin/sh\necho 'PHP fake'\n")
    os.chmod(binary, 0o755)
    return binary


class FakeSystem(LocalSystem):
    """Serves tarballs from memory and answers probes from a table.

    Extraction is inherited from LocalSystem so tests exercise real tarfile
    handling against temporary directories.
    """

    def __init__(self, tarballs=None):
        self.tarballs = dict(tarballs or {})
        self.downloads = []
        self.probes = []
        self.probe_results = {}
        self.default_probe = ProbeResult(ok=True, output="PHP 8.3.0 (cli) (NTS)")
        self.which_result = None
        self.user_path = []
        self.partial_on_failure = False

    def download(self, url, dest):
        self.downloads.append(url)
        data = self.tarballs.get(url)
        if data is None:
            if self.partial_on_failure:
                Path(dest).write_bytes(b"\x1f\x8b partial")
            raise NetworkFailure(url, "PHP source download returned HTTP 404")
        Path(dest).write_bytes(data)
        return len(data)

    def probe_version(self, binary):
        self.probes.append(binary)
        return self.probe_results.get(binary, self.default_probe)

    def which(self, name):
        return self.which_result

    def get_user_path(self):
        return list(self.user_path)

    def set_user_path(self, entries):
        self.user_path = list(entries)
