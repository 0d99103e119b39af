import subprocess
from unittest import mock

import pytest

from lxdkit.lxc import Lxc
from lxdkit.ssh import base_tools_commands, configure_ssh, get_ssh_config


class FakeRunner:
    def __init__(self, fail=()):
        self.calls = []
        self.fail = set(fail)

    def __call__(self, argv):
        argv = list(argv)
        self.calls.append(argv)
        rc = 1 if argv[-1] in self.fail else 0
        return subprocess.CompletedProcess(argv, rc, None, "boom" if rc else "")

    def shell_commands(self):
        return [c[-1] for c in self.calls if c[1] == "exec"]


def test_ubuntu_install_commands():
    config = get_ssh_config("ubuntu", "jammy")
    assert config.install_commands == [
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq openssh-server sudo ca-certificates",
    ]
    assert config.enable_commands[-1] == "systemctl start ssh"


def test_config_starts_with_base_commands():
    for distro in ("ubuntu", "alpine", "oracle", "nosuch"):
        config = get_ssh_config(distro, "1")
        assert config.config_commands[:3] == [
            "mkdir -p /run/sshd /var/run/sshd",
            "mkdir -p /root/.ssh && chmod 700 /root/.ssh",
            "echo 'root:password' | chpasswd",
        ]


def test_alpine_config_comments_gateway_port_first():
    config = get_ssh_config("alpine", "3.22")
    assert config.config_commands[3] == (
        "sed -i.bak 's/^GatewayPort/#GatewayPort/' /etc/ssh/sshd_config"
    )
    assert len(config.config_commands) == 8
    assert config.enable_commands[2] == "rc-update add sshd default"


def test_standard_config_backs_up_once():
    config = get_ssh_config("fedora", "41")
    edits = config.config_commands[3:]
    assert len(edits) == 4
    assert sum(".bak" in c for c in edits) == 1
    assert config.enable_commands[2] == "systemctl enable sshd"


def test_unsupported_distro_commands():
    config = get_ssh_config("gentoo", "x")
    assert config.install_commands == ["echo '不支持的发行版' && exit 1"]
    assert config.config_commands[-1] == "echo '不支持的发行版配置' && exit 1"
    assert config.enable_commands == ["echo '不支持的发行版启用命令' && exit 1"]


def test_cleanup_commands_are_shared():
    assert get_ssh_config("ubuntu", "noble").cleanup_commands == get_ssh_config(
        "alpine", "edge"
    ).cleanup_commands
    assert "rm -f /root/.bash_history" in get_ssh_config("debian", "trixie").cleanup_commands


def test_base_tools_commands():
    assert base_tools_commands("alpine") == ["apk add -q curl wget nano procps net-tools"]
    assert base_tools_commands("nosuch") == ["echo '不支持的发行版工具安装' && exit 1"]


@mock.patch("time.sleep")
def test_configure_ssh_applies_version_optimizations(sleep):
    runner = FakeRunner()
    configure_ssh(Lxc(runner), "box", "centos", "9-Stream")
    cmds = runner.shell_commands()
    assert "dnf config-manager --set-enabled crb 2>/dev/null || true" in cmds
    assert cmds[-1] == "rm -rf /tmp/* /var/tmp/*"
    assert cmds[0] == "dnf install -y openssh-server sudo ca-certificates"


@mock.patch("time.sleep")
def test_configure_ssh_without_optimizations(sleep):
    runner = FakeRunner()
    configure_ssh(Lxc(runner), "box", "ubuntu", "jammy")
    cmds = runner.shell_commands()
    config = get_ssh_config("ubuntu", "jammy")
    expected = (
        config.install_commands
        + config.config_commands
        + config.enable_commands
        + base_tools_commands("ubuntu")
        + config.cleanup_commands
    )
    assert cmds == expected


@mock.patch("time.sleep")
def test_configure_ssh_install_failure(sleep):
    runner = FakeRunner(fail={"apt-get update -qq"})
    with pytest.raises(RuntimeError, match="安装SSH服务失败"):
        configure_ssh(Lxc(runner), "box", "debian", "bookworm")
    assert runner.shell_commands() == ["apt-get update -qq"]


@mock.patch("time.sleep")
def test_configure_ssh_ignores_enable_failures(sleep):
    runner = FakeRunner(fail={"sshd -t"})
    configure_ssh(Lxc(runner), "box", "opensuse", "15.6")
    cmds = runner.shell_commands()
    assert "systemctl start sshd" in cmds
    assert cmds[-1] == "rm -rf /tmp/* /var/tmp/*"