"""Shared test fixtures for jout tests."""

import os
import stat
import sys
import textwrap

import pytest

from jout.disassembly import DisassemblyResult
from jout.toolchain import executable_name


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user config files and JOUT_* variables out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for key in list(os.environ):
        if key.startswith("JOUT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


SAMPLE_JAVAP_OUTPUT = textwrap.dedent(
    """\
    Compiled from "Foo.java"
    public class Foo {
      public Foo();
        Code:
           0: aload_0
           1: invokespecial #1                  // Method java/lang/Object."<init>":()V
           4: return

      public static void main(java.lang.String[]);
        Code:
           0: new           #7                  // class java/lang/StringBuilder
           3: dup
           4: invokespecial #9                  // Method java/lang/StringBuilder."<init>":()V
           7: astore_1
           8: iconst_3
           9: newarray       int
          11: astore_2
          12: iload_3
          13: tableswitch   { // 0 to 2
                         0: 40
                         1: 40
                         2: 44
                   default: 44
              }
          40: iconst_1
          41: anewarray     #11                 // class java/lang/String
          44: return
    }
    """
)

@pytest.fixture
def sample_javap_output():
    """Realistic javap -c -p output for one class."""
    return SAMPLE_JAVAP_OUTPUT


@pytest.fixture
def sample_counts():
    """Expected totals for SAMPLE_JAVAP_OUTPUT.

    3 instructions in the constructor, 12 in main; new, newarray and
    anewarray are the allocations.
    """
    return DisassemblyResult(instruction_count=15, allocation_count=3)


@pytest.fixture
def class_tree(tmp_path):
    """Output directory with top-level, inner and anonymous class files.

    out/
      Main.class            (10 bytes)
      readme.txt
      com/acme/Widget.class (20 bytes)
      com/acme/Widget$Part.class (30 bytes)
      com/acme/Widget$1.class    (40 bytes)
      empty/
    """
    root = tmp_path / "out"
    acme = root / "com" / "acme"
    acme.mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "Main.class").write_bytes(b"\xca\xfe\xba\xbe" + b"\x00" * 6)
    (root / "readme.txt").write_text("not a class")
    (acme / "Widget.class").write_bytes(b"\x00" * 20)
    (acme / "Widget$Part.class").write_bytes(b"\x00" * 30)
    (acme / "Widget$1.class").write_bytes(b"\x00" * 40)
    return root


@pytest.fixture
def make_java_home(tmp_path):
    """Factory writing a fake JDK whose bin/javap prints fixed text.

    Every invocation appends its arguments (one line) to ``<jdk>/calls.log``.
    """

    def _make(output: str = "", exit_code: int = 0, name: str = "jdk"):
        home = tmp_path / name
        bin_dir = home / "bin"
        bin_dir.mkdir(parents=True)
        calls_log = home / "calls.log"
        script = bin_dir / executable_name("javap")
        script.write_text(
            f"#!{sys.executable}\n"
            "import sys\n"
            f"with open({str(calls_log)!r}, 'a') as log:\n"
            "    log.write(' '.join(sys.argv[1:]) + '\\n')\n"
            f"sys.stdout.write({output!r})\n"
            f"sys.exit({exit_code})\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IEXEC | stat.S_IXGRP | stat.S_IXOTH)
        return home

    return _make
