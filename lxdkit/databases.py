"""Recipes for database and cache servers: MySQL, PostgreSQL, Redis and MongoDB."""

from __future__ import annotations

from lxdkit.recipe import (
    RPM_DNF,
    SYSTEMD_ALL,
    UNSUPPORTED_ENABLE,
    DistroKey,
    Phase,
    Recipe,
)

MYSQL_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq mysql-server",
    ),
    RPM_DNF: ("dnf install -y mysql-server",),
    "oracle": ("yum install -y mysql-server",),
    "alpine": ("apk update -q", "apk add -q mysql mysql-client"),
    "opensuse": ("zypper refresh", "zypper install -y mysql mysql-server"),
    "amazonlinux": ("dnf install -y mariadb105-server mariadb105",),
}

MYSQL_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): ("systemctl enable mysql",),
    (*RPM_DNF, "oracle", "opensuse"): ("systemctl enable mysqld",),
    "alpine": ("rc-update add mysql default",),
    "amazonlinux": ("systemctl enable mariadb",),
}

MYSQL = Recipe(
    name="mysql",
    phases=(
        Phase("安装MySQL", table=MYSQL_INSTALL, required=True),
        Phase(
            "配置MySQL",
            commands=(
                "mkdir -p /var/lib/mysql",
                "mkdir -p /var/run/mysqld",
                "chown -R mysql:mysql /var/lib/mysql /var/run/mysqld 2>/dev/null || true",
            ),
        ),
        Phase("启用MySQL服务", table=MYSQL_ENABLE, default=UNSUPPORTED_ENABLE),
        Phase("清理缓存"),
    ),
)

POSTGRESQL_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq postgresql postgresql-contrib",
    ),
    RPM_DNF: ("dnf install -y postgresql-server postgresql-contrib",),
    "oracle": ("yum install -y postgresql-server postgresql-contrib",),
    "alpine": ("apk update -q", "apk add -q postgresql postgresql-contrib"),
    "opensuse": ("zypper refresh", "zypper install -y postgresql-server postgresql-contrib"),
    "amazonlinux": ("dnf install -y postgresql15-server postgresql15-contrib",),
}

POSTGRESQL_CONFIG: dict[DistroKey, tuple[str, ...]] = {
    (*RPM_DNF, "oracle", "amazonlinux"): (
        "postgresql-setup --initdb 2>/dev/null || postgresql-setup initdb 2>/dev/null || true",
    ),
    "alpine": (
        "mkdir -p /var/lib/postgresql/data",
        "chown -R postgres:postgres /var/lib/postgresql",
        "su - postgres -c 'initdb -D /var/lib/postgresql/data' 2>/dev/null || true",
    ),
}

POSTGRESQL_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    SYSTEMD_ALL: ("systemctl enable postgresql",),
    "alpine": ("rc-update add postgresql default",),
}

POSTGRESQL = Recipe(
    name="postgresql",
    phases=(
        Phase("安装PostgreSQL", table=POSTGRESQL_INSTALL, required=True),
        Phase("配置PostgreSQL", table=POSTGRESQL_CONFIG, default=()),
        Phase("启用PostgreSQL服务", table=POSTGRESQL_ENABLE, default=UNSUPPORTED_ENABLE),
        Phase("清理缓存"),
    ),
)

REDIS_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq redis-server",
    ),
    RPM_DNF: ("dnf install -y redis",),
    "oracle": ("yum install -y redis",),
    "alpine": ("apk update -q", "apk add -q redis"),
    "opensuse": ("zypper refresh", "zypper install -y redis"),
    "amazonlinux": ("dnf install -y redis6",),
}

REDIS_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): ("systemctl enable redis-server",),
    (*RPM_DNF, "oracle", "opensuse", "amazonlinux"): ("systemctl enable redis",),
    "alpine": ("rc-update add redis default",),
}

REDIS = Recipe(
    name="redis",
    phases=(
        Phase("安装Redis", table=REDIS_INSTALL, required=True),
        Phase(
            "配置Redis",
            commands=(
                "mkdir -p /var/lib/redis",
                "mkdir -p /var/run/redis",
                "sed -i 's/bind 127.0.0.1/bind 0.0.0.0/' /etc/redis/redis.conf 2>/dev/null || "
                "sed -i 's/bind 127.0.0.1/bind 0.0.0.0/' /etc/redis.conf",
                "sed -i 's/protected-mode yes/protected-mode no/' /etc/redis/redis.conf 2>/dev/null || "
                "sed -i 's/protected-mode yes/protected-mode no/' /etc/redis.conf",
            ),
        ),
        Phase("启用Redis服务", table=REDIS_ENABLE, default=UNSUPPORTED_ENABLE),
        Phase("清理缓存"),
    ),
)

MONGODB_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq mongodb",
    ),
    RPM_DNF: ("dnf install -y mongodb mongodb-server",),
    "oracle": ("yum install -y mongodb mongodb-server",),
    "alpine": ("apk update -q", "apk add -q mongodb mongodb-tools"),
    "opensuse": ("zypper refresh", "zypper install -y mongodb mongodb-server"),
    "amazonlinux": ("dnf install -y mongodb mongodb-server",),
}

MONGODB_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian", *RPM_DNF, "oracle", "amazonlinux"): ("systemctl enable mongod",),
    "alpine": ("rc-update add mongodb default",),
    "opensuse": ("systemctl enable mongodb",),
}

MONGODB = Recipe(
    name="mongodb",
    phases=(
        Phase("安装MongoDB", table=MONGODB_INSTALL, required=True),
        Phase(
            "配置MongoDB",
            commands=(
                "mkdir -p /var/lib/mongodb",
                "mkdir -p /var/log/mongodb",
                "chown -R mongod:mongod /var/lib/mongodb /var/log/mongodb 2>/dev/null || "
                "chown -R mongodb:mongodb /var/lib/mongodb /var/log/mongodb 2>/dev/null || true",
            ),
        ),
        Phase("启用MongoDB服务", table=MONGODB_ENABLE, default=UNSUPPORTED_ENABLE),
        Phase("清理缓存"),
    ),
)