"""Recipes for language runtimes and toolchains."""

from __future__ import annotations

from lxdkit.recipe import RPM_DNF, DistroKey, Phase, Recipe

_GO_PACKAGE = "go" + "lang"

GO_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        f"DEBIAN_FRONTEND=noninteractive apt-get install -y -qq {_GO_PACKAGE}",
    ),
    RPM_DNF: (f"dnf install -y {_GO_PACKAGE}",),
    "oracle": (f"yum install -y {_GO_PACKAGE}",),
    "alpine": ("apk update -q", "apk add -q go"),
    "opensuse": ("zypper refresh", "zypper install -y go"),
    "amazonlinux": (f"dnf install -y {_GO_PACKAGE}",),
}

GO = Recipe(
    name=_GO_PACKAGE,
    phases=(
        Phase("安装Go语言", table=GO_INSTALL, required=True),
        Phase(
            "配置Go环境",
            commands=(
                "echo 'export GOPATH=/root/go' >> /root/.bashrc",
                "echo 'export PATH=$GOPATH/bin:$PATH' >> /root/.bashrc",
                "mkdir -p /root/go/{bin,src,pkg}",
            ),
        ),
        Phase("清理缓存", commands=("go clean -cache -modcache || true",)),
    ),
)

JAVA_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq default-jdk",
    ),
    RPM_DNF: ("dnf install -y java-latest-openjdk java-latest-openjdk-devel",),
    "oracle": ("yum install -y java-latest-openjdk java-latest-openjdk-devel",),
    "alpine": ("apk update -q", "apk add -q openjdk21"),
    "opensuse": ("zypper refresh", "zypper install -y java-openjdk java-openjdk-devel"),
    "amazonlinux": (
        "dnf install -y java-21-amazon-corretto java-21-amazon-corretto-devel",
    ),
}

JAVA = Recipe(
    name="java",
    phases=(
        Phase("安装Java", table=JAVA_INSTALL, required=True),
        Phase(
            "配置Java环境",
            commands=(
                "JAVA_HOME=$(dirname $(dirname $(readlink -f $(which java)))) && "
                "echo \"export JAVA_HOME=$JAVA_HOME\" >> /root/.bashrc",
                "echo 'export PATH=$JAVA_HOME/bin:$PATH' >> /root/.bashrc",
            ),
        ),
        Phase("清理缓存"),
    ),
)

NODEJS_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq nodejs npm",
    ),
    RPM_DNF: ("dnf install -y nodejs npm",),
    "oracle": ("yum install -y nodejs npm",),
    "alpine": ("apk update -q", "apk add -q nodejs npm"),
    "opensuse": ("zypper refresh", "zypper install -y nodejs npm"),
    "amazonlinux": ("dnf install -y nodejs npm",),
}

NODEJS = Recipe(
    name="nodejs",
    phases=(
        Phase("安装Node.js", table=NODEJS_INSTALL, required=True),
        Phase(
            "配置npm",
            commands=(
                "npm config set registry https://registry.npmjs.org/",
                "mkdir -p /root/.npm-global",
                "npm config set prefix /root/.npm-global",
                "echo 'export PATH=/root/.npm-global/bin:$PATH' >> /root/.bashrc",
            ),
        ),
        Phase("安装pnpm", commands=("npm install -g pnpm",)),
        Phase("清理缓存", commands=("npm cache clean --force", "rm -rf /root/.npm")),
    ),
)

PYTHON_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq "
        "python3 python3-pip python3-venv python3-dev",
    ),
    RPM_DNF: ("dnf install -y python3 python3-pip python3-devel",),
    "oracle": ("yum install -y python3 python3-pip python3-devel",),
    "alpine": ("apk update -q", "apk add -q python3 py3-pip python3-dev"),
    "opensuse": ("zypper refresh", "zypper install -y python3 python3-pip python3-devel"),
    "amazonlinux": ("dnf install -y python3 python3-pip python3-devel",),
}

PYTHON = Recipe(
    name="python",
    phases=(
        Phase("安装Python3", table=PYTHON_INSTALL, required=True),
        Phase(
            "配置pip",
            commands=(
                "python3 -m pip install --upgrade pip",
                "pip3 config set global.index-url https://pypi.org/simple",
                "mkdir -p /root/.local/bin",
                "echo 'export PATH=/root/.local/bin:$PATH' >> /root/.bashrc",
            ),
        ),
        Phase("清理缓存", commands=("pip3 cache purge || true", "rm -rf /root/.cache/pip")),
    ),
)