import dataclasses
import subprocess

import pytest

from lxdkit.languages import GO, JAVA, NODEJS, PYTHON
from lxdkit.lxc import Lxc
from lxdkit.recipe import UNSUPPORTED_INSTALL


class FakeRunner:
    def __init__(self, failing=()):
        self.calls = []
        self.failing = set(failing)

    def __call__(self, argv):
        argv = list(argv)
        self.calls.append(argv)
        code = 1 if argv[-1] in self.failing else 0
        return subprocess.CompletedProcess(argv, code, None, "")

    def commands(self):
        return [call[-1] for call in self.calls]


def run(recipe, distro, failing=()):
    runner = FakeRunner(failing)
    dataclasses.replace(recipe, settle=0).configure(Lxc(runner), "dev", distro, "v")
    return runner.commands()


def test_go_alpine():
    commands = run(GO, "alpine")
    assert commands[:2] == ["apk update -q", "apk add -q go"]
    assert commands[-1] == "go clean -cache -modcache || true"


def test_java_amazonlinux():
    commands = run(JAVA, "amazonlinux")
    assert commands[0] == "dnf install -y java-21-amazon-corretto java-21-amazon-corretto-devel"
    assert len(commands) == 3


def test_nodejs_installs_pnpm_after_config():
    commands = run(NODEJS, "debian")
    assert commands.index("npm install -g pnpm") > commands.index(
        "npm config set prefix /root/.npm-global"
    )
    assert commands[-2:] == ["npm cache clean --force", "rm -rf /root/.npm"]


def test_python_rocky_install():
    commands = run(PYTHON, "rockylinux")
    assert commands[0] == "dnf install -y python3 python3-pip python3-devel"
    assert "pip3 cache purge || true" in commands


@pytest.mark.parametrize(
    "recipe,label",
    [(GO, "安装Go语言失败"), (JAVA, "安装Java失败"), (NODEJS, "安装Node.js失败"), (PYTHON, "安装Python3失败")],
)
def test_unsupported_distro_raises(recipe, label):
    with pytest.raises(RuntimeError, match=label):
        run(recipe, "slackware", failing=set(UNSUPPORTED_INSTALL))


def test_optional_failures_do_not_stop(capsys):
    commands = run(PYTHON, "ubuntu", failing={"python3 -m pip install --upgrade pip"})
    assert commands[-1] == "rm -rf /root/.cache/pip"
    assert capsys.readouterr().out.count(" OK") == len(PYTHON.phases)


def test_java_ubuntu_has_no_cleanup_commands():
    assert run(JAVA, "ubuntu") == [
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq default-jdk",
        "JAVA_HOME=$(dirname $(dirname $(readlink -f $(which java)))) && "
        "echo \"export JAVA_HOME=$JAVA_HOME\" >> /root/.bashrc",
        "echo 'export PATH=$JAVA_HOME/bin:$PATH' >> /root/.bashrc",
    ]