"""Declarative tool recipes run inside a container, plus the docker and git recipes."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Mapping, Sequence, Tuple, Union

from lxdkit.lxc import CommandError, Lxc

DistroKey = Union[str, Tuple[str, ...]]
CommandTable = Mapping[DistroKey, Sequence[str]]

UNSUPPORTED_INSTALL: tuple[str, ...] = ("echo '不支持的发行版' && exit 1",)
UNSUPPORTED_ENABLE: tuple[str, ...] = ("echo '不支持的发行版启用命令' && exit 1",)

RPM_DNF: tuple[str, ...] = ("centos", "fedora", "almalinux", "rockylinux")
SYSTEMD_ALL: tuple[str, ...] = (
    "ubuntu",
    "debian",
    "centos",
    "fedora",
    "almalinux",
    "rockylinux",
    "oracle",
    "opensuse",
    "amazonlinux",
)


def commands_for(
    table: CommandTable, distro: str, default: Sequence[str] = UNSUPPORTED_INSTALL
) -> list[str]:
    """Return the commands the table gives a distro, or the default."""
    for key, commands in table.items():
        names = (key,) if isinstance(key, str) else key
        if distro in names:
            return list(commands)
    return list(default)


@dataclass(frozen=True)
class Phase:
    """One labelled step of a recipe: fixed commands or a per-distro table."""

    title: str
    commands: Sequence[str] = ()
    table: CommandTable | None = None
    default: Sequence[str] = UNSUPPORTED_INSTALL
    required: bool = False

    def _resolve(self, distro: str) -> list[str]:
        if self.table is not None:
            return commands_for(self.table, distro, self.default)
        return list(self.commands)


@dataclass(frozen=True)
class Recipe:
    """A named sequence of phases that installs and configures a tool."""

    name: str
    phases: tuple[Phase, ...] = field(default_factory=tuple)
    settle: float = 3.0

    def configure(self, lxc: Lxc, container: str, distro: str, version: str) -> None:
        """Run every phase in the container; failures only matter in required phases."""
        for index, phase in enumerate(self.phases):
            print(f"     {phase.title}...", end="", flush=True)
            if index == 0 and self.settle > 0:
                time.sleep(self.settle)
            for command in phase._resolve(distro):
                if phase.required:
                    try:
                        lxc.exec_shell(container, command, check=True)
                    except CommandError as exc:
                        raise RuntimeError(f"{phase.title}失败: {exc}") from exc
                else:
                    lxc.exec_shell(container, command, check=False)
            print(" OK")


DOCKER_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq docker.io docker-compose",
    ),
    RPM_DNF: ("dnf install -y docker docker-compose",),
    "oracle": ("yum install -y docker-engine docker-compose",),
    "alpine": ("apk update -q", "apk add -q docker docker-cli-compose"),
    "opensuse": ("zypper refresh", "zypper install -y docker docker-compose"),
    "amazonlinux": ("dnf install -y docker",),
}

DOCKER_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    SYSTEMD_ALL: ("systemctl enable docker", "systemctl start docker"),
    "alpine": ("rc-update add docker default", "rc-service docker start"),
}

DOCKER = Recipe(
    name="docker",
    phases=(
        Phase("安装Docker", table=DOCKER_INSTALL, required=True),
        Phase(
            "配置Docker",
            commands=(
                "mkdir -p /etc/docker",
                "echo '{\"storage-driver\": \"overlay2\"}' > /etc/docker/daemon.json",
            ),
        ),
        Phase("启用Docker服务", table=DOCKER_ENABLE, default=UNSUPPORTED_ENABLE),
        Phase("清理缓存", commands=("docker system prune -af || true",)),
    ),
)

GIT_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq git",
    ),
    RPM_DNF: ("dnf install -y git",),
    "oracle": ("yum install -y git",),
    "alpine": ("apk update -q", "apk add -q git"),
    "opensuse": ("zypper refresh", "zypper install -y git"),
    "amazonlinux": ("dnf install -y git",),
}

GIT = Recipe(
    name="git",
    phases=(
        Phase("安装Git", table=GIT_INSTALL, required=True),
        Phase(
            "配置Git",
            commands=(
                "git config --global init.defaultBranch main",
                "git config --global color.ui auto",
            ),
        ),
        Phase("清理缓存"),
    ),
)