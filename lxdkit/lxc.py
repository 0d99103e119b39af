"""A thin wrapper around the ``lxc`` command line client."""

from __future__ import annotations

import subprocess
import time
from typing import Callable, Sequence

Runner = Callable[[Sequence[str]], "subprocess.CompletedProcess[str]"]


def _default_runner(argv: Sequence[str]) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(
            list(argv),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as exc:
        return subprocess.CompletedProcess(list(argv), 127, None, str(exc))


class CommandError(Exception):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""
        super().__init__(str(self))

    def __str__(self) -> str:
        text = f"exit status {self.returncode}"
        if self.stderr:
            text += f", 错误详情: {self.stderr}"
        return text


class Lxc:
    """Runs ``lxc`` subcommands through a replaceable runner."""

    def __init__(self, runner: Runner | None = None) -> None:
        self._runner = runner or _default_runner

    def run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        """Run ``lxc`` with the given arguments; raise CommandError on failure if check."""
        argv = ["lxc", *args]
        result = self._runner(argv)
        if check and result.returncode != 0:
            raise CommandError(argv, result.returncode, result.stderr or "")
        return result

    def exec_shell(
        self, container: str, command: str, check: bool = False
    ) -> subprocess.CompletedProcess[str]:
        """Run a shell command inside a container."""
        return self.run("exec", container, "--", "sh", "-c", command, check=check)

    def delete_image(self, name: str) -> None:
        """Delete an image alias, ignoring failure."""
        self.run("image", "delete", name, check=False)

    def delete_container(self, name: str) -> None:
        """Force-delete a container, ignoring failure."""
        self.run("delete", "-f", name, check=False)

    def launch(self, image: str, container: str) -> None:
        """Replace any container of that name with a fresh one from the image."""
        self.delete_container(container)
        self.run("launch", image, container)

    def import_image(self, meta_file: str, rootfs_file: str, alias: str) -> None:
        """Import a split image under an alias, replacing an existing one."""
        self.delete_image(alias)
        self.run("image", "import", meta_file, rootfs_file, "--alias", alias)

    def publish(self, container: str, alias: str) -> None:
        """Stop a container and publish it as an image under the alias."""
        self.delete_image(alias)
        self.force_stop(container)
        self.run("publish", container, "--alias", alias)

    def export_image(self, name: str, target: str) -> None:
        """Export an image to files named after the target."""
        self.run("image", "export", name, target)

    def force_stop(self, container: str) -> None:
        """Stop a container, falling back to a forced stop."""
        print("     强制停止容器...")
        if self.run("stop", container, "--timeout", "10", check=False).returncode == 0:
            return
        self.run("stop", container, "--force", check=False)
        time.sleep(3)
        self.run("info", container, check=False)

    def cleanup(
        self,
        base_image: str | None = "",
        container: str | None = "",
        final_image: str | None = "",
    ) -> None:
        """Remove the given container and images, skipping empty names."""
        if container:
            self.delete_container(container)
        if base_image:
            self.delete_image(base_image)
        if final_image:
            self.delete_image(final_image)