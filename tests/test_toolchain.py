"""Tests for javap discovery."""

import pytest

from jout.exceptions import DisassemblerNotFoundError
from jout.toolchain import executable_name, find_java_home, locate_disassembler


class TestExecutableName:
    def test_windows_suffix(self):
        assert executable_name("javap", "win32") == "javap.exe"

    def test_posix_has_no_suffix(self):
        assert executable_name("javap", "linux") == "javap"
        assert executable_name("javap", "darwin") == "javap"


class TestLocateDisassembler:
    """Test JDK resolution order and failure."""

    def test_explicit_java_home(self, make_java_home):
        home = make_java_home()
        located = locate_disassembler(str(home))
        assert located == (home / "bin" / executable_name("javap")).absolute()

    def test_java_home_environment(self, make_java_home, monkeypatch):
        home = make_java_home()
        monkeypatch.setenv("JAVA_HOME", str(home))
        assert locate_disassembler().parent == (home / "bin").absolute()

    def test_explicit_beats_environment(self, make_java_home, monkeypatch):
        env_home = make_java_home(name="env-jdk")
        explicit = make_java_home(name="explicit-jdk")
        monkeypatch.setenv("JAVA_HOME", str(env_home))
        assert find_java_home(str(explicit)) == explicit

    def test_java_on_path(self, tmp_path, monkeypatch):
        """Without JAVA_HOME the JDK is the parent of java's bin directory."""
        monkeypatch.delenv("JAVA_HOME", raising=False)
        java = tmp_path / "jdk" / "bin" / "java"
        java.parent.mkdir(parents=True)
        java.write_text("")
        monkeypatch.setattr("jout.toolchain.shutil.which", lambda name: str(java))
        assert find_java_home() == java.resolve().parent.parent

    def test_missing_javap_raises(self, tmp_path):
        empty_home = tmp_path / "not-a-jdk"
        (empty_home / "bin").mkdir(parents=True)
        with pytest.raises(DisassemblerNotFoundError) as exc_info:
            locate_disassembler(str(empty_home))
        assert exc_info.value.executable.name == executable_name("javap")

    def test_no_jdk_at_all_raises(self, monkeypatch):
        monkeypatch.delenv("JAVA_HOME", raising=False)
        monkeypatch.setattr("jout.toolchain.shutil.which", lambda name: None)
        with pytest.raises(DisassemblerNotFoundError):
            locate_disassembler()
