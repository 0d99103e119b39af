"""SSH server setup for container images."""

from __future__ import annotations

from dataclasses import dataclass, field

from lxdkit.distros import version_optimizations
from lxdkit.lxc import Lxc
from lxdkit.recipe import RPM_DNF, UNSUPPORTED_ENABLE, DistroKey, Phase, Recipe, commands_for

_SSHD_CONFIG_PATH = "/etc/ssh/sshd_config"
_SERVER_PACKAGES = "openssh-server sudo ca-certificates"


def _apt(packages: str) -> str:
    return f"DEBIAN_FRONTEND=noninteractive apt-get install -y -qq {packages}"


def _set_option(option: str, value: str, *, backup: bool = False) -> str:
    flag = "-i.bak" if backup else "-i"
    return f"sed {flag} 's/#*{option}.*/{option} {value}/' {_SSHD_CONFIG_PATH}"


def _enable(start_service: tuple[str, str]) -> tuple[str, ...]:
    enable, start = start_service
    return ("ssh-keygen -A", "sshd -t", enable, start)


def _systemd(service: str) -> tuple[str, str]:
    return f"systemctl enable {service}", f"systemctl start {service}"


_OPTIONS = (
    ("PermitRootLogin", "yes"),
    ("PasswordAuthentication", "yes"),
    ("PubkeyAuthentication", "yes"),
    ("Port", "22"),
)

_STANDARD_EDITS: tuple[str, ...] = tuple(
    _set_option(option, value, backup=position == 0)
    for position, (option, value) in enumerate(_OPTIONS)
)

_ALPINE_EDITS: tuple[str, ...] = (
    f"sed -i.bak 's/^GatewayPort/#GatewayPort/' {_SSHD_CONFIG_PATH}",
    *(_set_option(option, value) for option, value in _OPTIONS),
)

_BASE_CONFIG: tuple[str, ...] = (
    "mkdir -p /run/sshd /var/run/sshd",
    "mkdir -p /root/.ssh && chmod 700 /root/.ssh",
    "echo 'root:password' | chpasswd",
)

_CLEANUP: tuple[str, ...] = (
    "history -c",
    "rm -f /root/.bash_history",
    "rm -rf /tmp/* /var/tmp/*",
)

_SSH_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): ("apt-get update -qq", _apt(_SERVER_PACKAGES)),
    RPM_DNF: (f"dnf install -y {_SERVER_PACKAGES}",),
    "oracle": (
        " || ".join(
            (
                "yum install -y oracle-epel-release-el8",
                "yum install -y oracle-epel-release-el9",
                "true",
            )
        ),
        f"yum install -y {_SERVER_PACKAGES}",
    ),
    "alpine": ("apk update -q", "apk add -q openssh-server sudo bash ca-certificates"),
    "opensuse": ("zypper refresh", f"zypper install -y {_SERVER_PACKAGES}"),
    "amazonlinux": (f"dnf install -y {_SERVER_PACKAGES} shadow-utils",),
}

_SSH_CONFIG: dict[DistroKey, tuple[str, ...]] = {
    (*RPM_DNF, "ubuntu", "debian", "oracle", "opensuse", "amazonlinux"): _STANDARD_EDITS,
    "alpine": _ALPINE_EDITS,
}

_SSH_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): _enable(_systemd("ssh")),
    (*RPM_DNF, "oracle", "opensuse", "amazonlinux"): _enable(_systemd("sshd")),
    "alpine": _enable(("rc-update add sshd default", "rc-service sshd start")),
}

_TOOLS_PLAIN = "curl wget nano procps net-tools"
_TOOLS_NG = "curl wget nano procps-ng net-tools"

_BASE_TOOLS: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (_apt(_TOOLS_PLAIN),),
    RPM_DNF: (f"dnf install -y {_TOOLS_NG}",),
    "oracle": (f"yum install -y {_TOOLS_NG}",),
    "alpine": (f"apk add -q {_TOOLS_PLAIN}",),
    "opensuse": (f"zypper install -y {_TOOLS_PLAIN}",),
    "amazonlinux": (f"dnf install -y {_TOOLS_NG}",),
}

_UNSUPPORTED_CONFIG = ("echo '不支持的发行版配置' && exit 1",)
_UNSUPPORTED_TOOLS = ("echo '不支持的发行版工具安装' && exit 1",)


@dataclass
class SSHConfig:
    """The shell commands that install, configure, enable and tidy an SSH server."""

    install_commands: list[str] = field(default_factory=list)
    config_commands: list[str] = field(default_factory=list)
    enable_commands: list[str] = field(default_factory=list)
    cleanup_commands: list[str] = field(default_factory=list)


def get_ssh_config(distro: str, version: str) -> SSHConfig:
    """Return the SSH setup commands for a distribution."""
    return SSHConfig(
        install_commands=commands_for(_SSH_INSTALL, distro),
        config_commands=[*_BASE_CONFIG, *commands_for(_SSH_CONFIG, distro, _UNSUPPORTED_CONFIG)],
        enable_commands=commands_for(_SSH_ENABLE, distro, UNSUPPORTED_ENABLE),
        cleanup_commands=list(_CLEANUP),
    )


def base_tools_commands(distro: str) -> list[str]:
    """Return the commands that install everyday command-line tools."""
    return commands_for(_BASE_TOOLS, distro, _UNSUPPORTED_TOOLS)


def configure_ssh(lxc: Lxc, container: str, distro: str, version: str) -> None:
    """Install and enable an SSH server with basic tools inside the container."""
    config = get_ssh_config(distro, version)
    phases = [
        Phase("安装SSH服务", commands=tuple(config.install_commands), required=True),
        Phase("配置SSH服务", commands=tuple(config.config_commands)),
        Phase("启用SSH服务", commands=tuple(config.enable_commands)),
        Phase("安装基础工具", commands=tuple(base_tools_commands(distro))),
    ]
    optimizations = version_optimizations(distro, version)
    if optimizations:
        phases.append(Phase("应用版本优化", commands=tuple(optimizations)))
    phases.append(Phase("清理SSH临时文件", commands=tuple(config.cleanup_commands)))
    Recipe(name="ssh", phases=tuple(phases)).configure(lxc, container, distro, version)