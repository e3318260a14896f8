from swift_function_times.extractors.flags import has_compiler_flag


def test_has_compiler_flag_detects_frontend_flag() -> None:
    command = "swiftc -c main.swift -Xfrontend -debug-time-function-bodies -O"
    assert has_compiler_flag(command)


def test_has_compiler_flag_is_a_substring_match() -> None:
    assert has_compiler_flag('swiftc "-debug-time-function-bodies-extra"')
    assert has_compiler_flag("-debug-time-function-bodies")


def test_has_compiler_flag_rejects_other_invocations() -> None:
    assert not has_compiler_flag("swiftc -c main.swift -Xfrontend -debug-time-expression-type-checking")
    assert not has_compiler_flag("")


def test_has_compiler_flag_accepts_custom_flag() -> None:
    assert has_compiler_flag("swiftc -Xfrontend -warn-long-function-bodies=100", "-warn-long-function-bodies")
