"""Recipes for the web stack: Apache, Nginx and PHP with Composer."""

from __future__ import annotations

from lxdkit.recipe import (
    RPM_DNF,
    SYSTEMD_ALL,
    UNSUPPORTED_ENABLE,
    DistroKey,
    Phase,
    Recipe,
)

APACHE_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq apache2",
    ),
    RPM_DNF: ("dnf install -y httpd",),
    "oracle": ("yum install -y httpd",),
    "alpine": ("apk update -q", "apk add -q apache2"),
    "opensuse": ("zypper refresh", "zypper install -y apache2"),
    "amazonlinux": ("dnf install -y httpd",),
}

APACHE_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): ("systemctl enable apache2",),
    (*RPM_DNF, "oracle", "opensuse", "amazonlinux"): ("systemctl enable httpd",),
    "alpine": ("rc-update add apache2 default",),
}

APACHE = Recipe(
    name="apache",
    phases=(
        Phase("安装Apache", table=APACHE_INSTALL, required=True),
        Phase(
            "配置Apache",
            commands=(
                "mkdir -p /var/www/html",
                "chown -R www-data:www-data /var/www/html 2>/dev/null || "
                "chown -R apache:apache /var/www/html 2>/dev/null || true",
            ),
        ),
        Phase("启用Apache服务", table=APACHE_ENABLE, default=UNSUPPORTED_ENABLE),
        Phase("清理缓存"),
    ),
)

NGINX_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq nginx",
    ),
    RPM_DNF: ("dnf install -y nginx",),
    "oracle": ("yum install -y nginx",),
    "alpine": ("apk update -q", "apk add -q nginx"),
    "opensuse": ("zypper refresh", "zypper install -y nginx"),
    "amazonlinux": ("dnf install -y nginx",),
}

NGINX_ENABLE: dict[DistroKey, tuple[str, ...]] = {
    SYSTEMD_ALL: ("systemctl enable nginx",),
    "alpine": ("rc-update add nginx default",),
}

NGINX = Recipe(
    name="nginx",
    phases=(
        Phase("安装Nginx", table=NGINX_INSTALL, required=True),
        Phase(
            "配置Nginx",
            commands=(
                "mkdir -p /var/www/html",
                "mkdir -p /etc/nginx/sites-available",
                "mkdir -p /etc/nginx/sites-enabled",
                "chown -R nginx:nginx /var/www/html 2>/dev/null || "
                "chown -R www-data:www-data /var/www/html",
            ),
        ),
        Phase("启用Nginx服务", table=NGINX_ENABLE, default=UNSUPPORTED_ENABLE),
        Phase("清理缓存"),
    ),
)

PHP_INSTALL: dict[DistroKey, tuple[str, ...]] = {
    ("ubuntu", "debian"): (
        "apt-get update -qq",
        "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq php php-fpm php-cli "
        "php-common php-mbstring php-xml php-curl php-zip php-mysql php-pgsql php-redis",
    ),
    RPM_DNF: (
        "dnf install -y php php-fpm php-cli php-common php-mbstring php-xml php-curl "
        "php-zip php-mysqlnd php-pgsql php-redis",
    ),
    "oracle": (
        "yum install -y php php-fpm php-cli php-common php-mbstring php-xml php-curl "
        "php-zip php-mysqlnd php-pgsql",
    ),
    "alpine": (
        "apk update -q",
        "apk add -q php php-fpm php-cli php-mbstring php-xml php-curl php-zip "
        "php-mysqli php-pgsql php-redis",
    ),
    "opensuse": (
        "zypper refresh",
        "zypper install -y php php-fpm php-cli php-mbstring php-curl php-zip "
        "php-mysql php-pgsql",
    ),
    "amazonlinux": (
        "dnf install -y php php-fpm php-cli php-common php-mbstring php-xml php-curl "
        "php-zip php-mysqlnd php-pgsql",
    ),
}

PHP = Recipe(
    name="php",
    phases=(
        Phase("安装PHP", table=PHP_INSTALL, required=True),
        Phase(
            "配置PHP",
            commands=(
                "mkdir -p /var/run/php",
                "sed -i 's/;cgi.fix_pathinfo=1/cgi.fix_pathinfo=0/' "
                "/etc/php*/fpm/php.ini 2>/dev/null || true",
                "sed -i 's/upload_max_filesize = 2M/upload_max_filesize = 64M/' "
                "/etc/php*/fpm/php.ini 2>/dev/null || true",
                "sed -i 's/post_max_size = 8M/post_max_size = 64M/' "
                "/etc/php*/fpm/php.ini 2>/dev/null || true",
            ),
        ),
        Phase(
            "安装Composer",
            commands=(
                "curl -sS https://getcomposer.org/installer | php",
                "mv composer.phar /usr/local/bin/composer",
                "chmod +x /usr/local/bin/composer",
            ),
        ),
        Phase(
            "清理缓存",
            commands=("composer clear-cache || true", "rm -rf /root/.composer/cache"),
        ),
    ),
)