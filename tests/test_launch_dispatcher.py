import io
import shlex

import pytest

from kcl_bootstrap.domain import Invocation, LaunchPlan
from kcl_bootstrap.launch import (
    MULTILANG_DAEMON_CLASS,
    InvocationBuilder,
    LaunchDispatcher,
    OsCategory,
    detect_os_category,
)


def build_invocation(**overrides) -> Invocation:
    params = {
        "runtime": "/usr/bin/java",
        "classpath": "/work/j/*",
        "properties_file": "p.cfg",
        "log_configuration": None,
    }
    params.update(overrides)
    return InvocationBuilder().build(**params)


class FakeLauncher:
    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, argv):
        self.calls.append(list(argv))
        return self.returncode


def test_builder_argument_order():
    invocation = build_invocation()

    assert invocation.argv == [
        "/usr/bin/java",
        "-cp",
        "/work/j/*",
        MULTILANG_DAEMON_CLASS,
        "-p",
        "p.cfg",
    ]


def test_builder_appends_log_configuration_last():
    invocation = build_invocation(log_configuration="logback.xml")

    assert invocation.arguments[-2:] == ("-l", "logback.xml")


def test_builder_ignores_empty_log_configuration():
    assert "-l" not in build_invocation(log_configuration="").arguments


def test_builder_passes_missing_properties_through_as_empty():
    assert build_invocation(properties_file=None).arguments[-1] == ""


def test_print_on_unix():
    out = io.StringIO()
    dispatcher = LaunchDispatcher(launcher=FakeLauncher(), stdout=out, os_category=OsCategory.UNIX)

    status = dispatcher.run(LaunchPlan.print(build_invocation()))

    assert status == 0
    assert out.getvalue() == (
        f'"/usr/bin/java" "-cp" "/work/j/*" "{MULTILANG_DAEMON_CLASS}" "-p" "p.cfg"\n'
    )


def test_print_on_windows_uses_call_operator():
    dispatcher = LaunchDispatcher(launcher=FakeLauncher(), os_category=OsCategory.WINDOWS)
    invocation = build_invocation(runtime="C:\\Program Files\\Java\\bin\\java.exe")

    rendered = dispatcher.render(invocation)

    assert rendered.startswith('& "C:\\Program Files\\Java\\bin\\java.exe" "-cp"')


def test_print_does_not_launch(capsys):
    launcher = FakeLauncher()
    dispatcher = LaunchDispatcher(launcher=launcher, os_category=OsCategory.UNIX)

    dispatcher.run(LaunchPlan.print(build_invocation()))

    assert launcher.calls == []
    assert capsys.readouterr().out.startswith('"/usr/bin/java"')


def test_execute_passes_argv_vector():
    launcher = FakeLauncher()
    out = io.StringIO()
    invocation = build_invocation(log_configuration="log config.xml")

    status = LaunchDispatcher(launcher=launcher, stdout=out).run(LaunchPlan.execute(invocation))

    assert status == 0
    assert launcher.calls == [invocation.argv]
    assert out.getvalue() == ""


@pytest.mark.parametrize("returncode", [0, 1, 3, 130])
def test_execute_propagates_exit_code(returncode):
    dispatcher = LaunchDispatcher(launcher=FakeLauncher(returncode))

    assert dispatcher.run(LaunchPlan.execute(build_invocation())) == returncode


def test_execute_reports_signal_like_a_shell():
    dispatcher = LaunchDispatcher(launcher=FakeLauncher(-15))

    assert dispatcher.run(LaunchPlan.execute(build_invocation())) == 143


def test_printed_command_matches_executed_argv():
    invocation = build_invocation(classpath="/work/my jars/*", log_configuration="logback.xml")
    launcher = FakeLauncher()
    out = io.StringIO()
    dispatcher = LaunchDispatcher(launcher=launcher, stdout=out, os_category=OsCategory.UNIX)

    dispatcher.run(LaunchPlan.print(invocation))
    dispatcher.run(LaunchPlan.execute(invocation))

    assert shlex.split(out.getvalue()) == launcher.calls[0]


@pytest.mark.parametrize(
    "system, expected",
    [
        ("Windows", OsCategory.WINDOWS),
        ("Linux", OsCategory.UNIX),
        ("Darwin", OsCategory.UNIX),
    ],
)
def test_detect_os_category(system, expected):
    assert detect_os_category(system) == expected
