import json
import os
import stat
import sys
from pathlib import Path

import pytest

from config import compiler_config

# Stand-in for javac: behaviour is driven by markers in the source file.
# ERROR -> prints an error and writes nothing, WARN -> writes the class and
# prints a warning, HANG -> sleeps, STALE -> prints nothing and writes nothing.
FAKE_JAVAC = '''#!{python}
import json, sys, time
from pathlib import Path

with open({log!r}, "a") as log:
    log.write(json.dumps(sys.argv[1:]) + "\\n")

source = Path(sys.argv[-1])
text = source.read_text()
if "HANG" in text:
    time.sleep(30)
if "ERROR" in text:
    print(f"{{source}}:3: error: cannot find symbol")
    print("  symbol:   variable undefinedThing")
    print("1 error")
    sys.exit(1)
if "STALE" in text:
    sys.exit(0)
source.with_suffix(".class").write_bytes(b"\\xca\\xfe\\xba\\xbe")
if "WARN" in text:
    print("warning: [options] bootstrap class path not set", file=sys.stderr)
    print("1 warning", file=sys.stderr)
'''

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="fake javac is a POSIX script")


def write_executable(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def write_source(directory: Path, name: str, body: str = "") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(f"public class {path.stem} {{\n    // {body}\n}}\n", encoding="utf-8")
    return path


def read_invocations(jdk_home: Path):
    log = jdk_home / "invocations.log"
    if not log.exists():
        return []
    return [json.loads(line) for line in log.read_text().splitlines()]


@pytest.fixture
def fake_jdk(tmp_path: Path) -> Path:
    """A toolchain home with a scripted javac in bin/."""
    home = tmp_path / "jdk"
    log = home / "invocations.log"
    write_executable(home / "bin" / "javac", FAKE_JAVAC.format(python=sys.executable, log=str(log)))
    return home


@pytest.fixture(autouse=True)
def clean_compiler_config(monkeypatch):
    for name in ("JAVA_HOME", "TESTGEN_LIB_PATHS", "TESTGEN_JUNIT_PATHS", "TESTGEN_COMPILE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    compiler_config.reset()
    yield
    compiler_config.reset()
