from pathlib import Path

import pytest

import compile_test
from cli.arguments import parse_args, validate_timeout
from config import compiler_config
from conftest import posix_only, read_invocations, write_source


def test_parse_args_applies_config(tmp_path: Path):
    args = parse_args([
        "FooTest.java",
        "--java-home", str(tmp_path),
        "--lib-path", "a.jar",
        "--lib-path", "b.jar",
        "--junit-path", "junit.jar",
        "--build-path", "build/classes",
        "--timeout", "15",
    ])

    assert args.sources == [Path("FooTest.java")]
    assert compiler_config.get_java_home() == str(tmp_path)
    assert compiler_config.get_lib_paths() == ["a.jar", "b.jar"]
    assert compiler_config.get_junit_lib_paths() == ["junit.jar"]
    assert compiler_config.get_build_path() == "build/classes"
    assert compiler_config.get_timeout_seconds() == 15


def test_java_home_from_environment(monkeypatch):
    monkeypatch.setenv("JAVA_HOME", "/opt/jdk11")

    parse_args(["FooTest.java"])

    assert compiler_config.get_java_home() == "/opt/jdk11"


def test_non_java_source_rejected():
    with pytest.raises(SystemExit):
        parse_args(["FooTest.kt"])


def test_zero_timeout_disables_it():
    assert validate_timeout(0) is None
    with pytest.raises(ValueError):
        validate_timeout(-1)


def test_missing_java_home_exit_code(capsys):
    assert compile_test.main(["FooTest.java"]) == compile_test.EXIT_TOOLCHAIN_NOT_FOUND
    assert "JAVA_HOME" in capsys.readouterr().out


def test_toolchain_not_found_exit_code(tmp_path: Path, capsys):
    (tmp_path / "jdk").mkdir()

    code = compile_test.main(["FooTest.java", "--java-home", str(tmp_path / "jdk")])

    assert code == compile_test.EXIT_TOOLCHAIN_NOT_FOUND
    assert "Cannot find compiler" in capsys.readouterr().out


@posix_only
def test_compiles_sources_and_reports(fake_jdk: Path, tmp_path: Path, capsys):
    good = write_source(tmp_path, "GoodTest.java")
    broken = write_source(tmp_path, "BrokenTest.java", "ERROR")

    code = compile_test.main([
        str(good), str(broken),
        "--java-home", str(fake_jdk),
        "--lib-path", "a.jar",
        "--build-path", "out",
        "--print-classpath",
    ])

    out = capsys.readouterr().out
    assert code == compile_test.EXIT_COMPILE_FAILURE
    assert "1/2 file(s) compiled" in out
    assert "cannot find symbol" in out
    assert [call[1] for call in read_invocations(fake_jdk)] == ["a.jar:out"] * 2


@posix_only
def test_all_compiled_exit_code(fake_jdk: Path, tmp_path: Path):
    good = write_source(tmp_path, "GoodTest.java")

    assert compile_test.main([str(good), "--java-home", str(fake_jdk)]) == compile_test.EXIT_OK


@posix_only
def test_zero_timeout_from_environment_compiles(fake_jdk: Path, tmp_path: Path, monkeypatch):
    monkeypatch.setenv("TESTGEN_COMPILE_TIMEOUT", "0")
    good = write_source(tmp_path, "GoodTest.java")

    assert compile_test.main([str(good), "--java-home", str(fake_jdk)]) == compile_test.EXIT_OK
    assert compiler_config.get_timeout_seconds() is None
