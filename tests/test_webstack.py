import dataclasses
import subprocess

import pytest

from lxdkit.lxc import Lxc
from lxdkit.webstack import APACHE, NGINX, PHP


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


def fast(recipe):
    return dataclasses.replace(recipe, settle=0)


def test_apache_on_ubuntu_runs_commands_in_order():
    runner = FakeRunner()
    fast(APACHE).configure(Lxc(runner), "box", "ubuntu", "jammy")
    cmds = runner.shell_commands()
    assert cmds[0] == "apt-get update -qq"
    assert cmds[1] == "DEBIAN_FRONTEND=noninteractive apt-get install -y -qq apache2"
    assert cmds[2] == "mkdir -p /var/www/html"
    assert cmds[-1] == "systemctl enable apache2"
    assert len(cmds) == 5


def test_apache_enable_uses_httpd_on_rpm_distros():
    runner = FakeRunner()
    fast(APACHE).configure(Lxc(runner), "box", "rockylinux", "9")
    cmds = runner.shell_commands()
    assert cmds[0] == "dnf install -y httpd"
    assert cmds[-1] == "systemctl enable httpd"


def test_apache_alpine_uses_openrc():
    runner = FakeRunner()
    fast(APACHE).configure(Lxc(runner), "box", "alpine", "3.20")
    assert runner.shell_commands()[-1] == "rc-update add apache2 default"


def test_commands_run_inside_container():
    runner = FakeRunner()
    fast(NGINX).configure(Lxc(runner), "web1", "debian", "bookworm")
    for call in runner.calls:
        assert call[:6] == ["lxc", "exec", "web1", "--", "sh", "-c"]


def test_nginx_alpine_enable():
    runner = FakeRunner()
    fast(NGINX).configure(Lxc(runner), "box", "alpine", "edge")
    cmds = runner.shell_commands()
    assert cmds[:2] == ["apk update -q", "apk add -q nginx"]
    assert cmds[-1] == "rc-update add nginx default"


def test_unsupported_distro_fails_install():
    runner = FakeRunner(fail={"echo '不支持的发行版' && exit 1"})
    with pytest.raises(RuntimeError, match="安装Nginx失败"):
        fast(NGINX).configure(Lxc(runner), "box", "gentoo", "x")
    assert runner.shell_commands() == ["echo '不支持的发行版' && exit 1"]


def test_install_failure_stops_recipe():
    runner = FakeRunner(fail={"dnf install -y httpd"})
    with pytest.raises(RuntimeError):
        fast(APACHE).configure(Lxc(runner), "box", "fedora", "41")
    assert len(runner.shell_commands()) == 1


def test_php_config_failures_are_ignored():
    fail = {"mv composer.phar /usr/local/bin/composer", "mkdir -p /var/run/php"}
    runner = FakeRunner(fail=fail)
    fast(PHP).configure(Lxc(runner), "box", "ubuntu", "noble")
    cmds = runner.shell_commands()
    assert "curl -sS https://getcomposer.org/installer | php" in cmds
    assert cmds[-2:] == ["composer clear-cache || true", "rm -rf /root/.composer/cache"]


def test_php_oracle_uses_yum():
    runner = FakeRunner()
    fast(PHP).configure(Lxc(runner), "box", "oracle", "9")
    first = runner.shell_commands()[0]
    assert first.startswith("yum install -y php")
    assert "php-redis" not in first