import sys

from run_tests import TestRunner, build_parser


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.suite == "all"
    assert args.browser == "chrome"
    assert args.headed is False
    assert args.allure is True


def test_no_allure_flag():
    assert build_parser().parse_args(["--no-allure"]).allure is False


def test_unit_suite_command_has_no_browser_flags():
    runner = TestRunner(suite="unit", allure_report=False)

    cmd = runner.build_pytest_command()

    assert cmd[:4] == [sys.executable, "-m", "pytest", "testsuites/unit"]
    assert "--run-ui" not in cmd
    assert "--alluredir" not in cmd
    assert cmd[-1] == "-q"


def test_ui_suite_command():
    runner = TestRunner(
        suite="ui", tags=["P0", "smoke"], parallel=4, verbose=True, allure_report=False
    )

    cmd = runner.build_pytest_command()

    assert "testsuites/ui_testing/tests" in cmd
    assert "--run-ui" in cmd
    assert cmd[cmd.index("-m", 3) + 1] == "P0 or smoke"
    assert cmd[cmd.index("-n") + 1] == "4"
    assert cmd[-1] == "-v"


def test_browser_choice_is_passed_as_override():
    env = TestRunner(browser="firefox", headless=False).build_env()

    assert env["BROWSER_NAME"] == "firefox"
    assert env["BROWSER_HEADLESS"] == "false"


def test_parallel_plugin_is_a_runtime_dependency(project_root):
    pyproject = (project_root / "pyproject.toml").read_text(encoding="utf-8")
    runtime = pyproject.split("[project.optional-dependencies]")[0]

    assert '"pytest-xdist' in runtime


def test_ui_framework_is_a_regular_package():
    import autotest_tools.report_tools
    import testsuites.ui_testing

    assert testsuites.ui_testing.__file__ is not None
    assert autotest_tools.report_tools.__file__ is not None
