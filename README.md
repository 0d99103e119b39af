# lxdkit

A small library for provisioning LXD containers. It installs and configures
common tools inside a running container through the `lxc` command-line client.
It also provides a catalogue of application error codes.

You need an `lxc` client connected to a working LXD daemon. Every command
inside a container runs as `lxc exec <container> -- sh -c <command>`.

## Installation

```
pip install .
```

## Running lxc

`lxdkit.lxc.Lxc` wraps the `lxc` client. By default it runs commands with
`subprocess`. You can pass your own runner, a callable that takes the argument
list and returns a `subprocess.CompletedProcess`.

- `run(*args, check=True)` runs `lxc <args>`. If `check` is true and the exit
  status is non-zero, it raises `lxdkit.lxc.CommandError`.
- `exec_shell(container, command, check=False)` runs a shell command inside a
  container.
- `launch`, `import_image`, `publish`, `export_image`, `force_stop`,
  `delete_image`, `delete_container` and `cleanup` cover container and image
  management. `launch`, `import_image` and `publish` first delete any existing
  container or image of the same name.

## Tool recipes

A `lxdkit.recipe.Recipe` is a named sequence of `Phase`s. Each phase holds
either fixed commands or a table of commands per distribution. Use
`commands_for` to look up a distribution in such a table.

`Recipe.configure(lxc, container, distro, version)` prints each phase and runs
its commands. It waits a few seconds before the first phase. If a command in a
required (install) phase fails, it raises `RuntimeError`. Failures in the other
phases are ignored.

Available recipes:

| module                | recipes                                 |
|-----------------------|-----------------------------------------|
| `lxdkit.recipe`       | `DOCKER`, `GIT`                         |
| `lxdkit.languages`    | `GO`, `JAVA`, `NODEJS`, `PYTHON`        |
| `lxdkit.webstack`     | `APACHE`, `NGINX`, `PHP`                |
| `lxdkit.databases`    | `MYSQL`, `POSTGRESQL`, `REDIS`, `MONGODB` |

`lxdkit.ssh.configure_ssh(lxc, container, distro, version)` installs and
enables an SSH server. It also installs basic tools (`base_tools_commands`) and
applies the repository tweaks for the version. To get the commands without
running them, call `get_ssh_config`, which returns an `SSHConfig`. This setup
allows root login and sets root's password to `password`. Change it before you
expose the container.

```python
from lxdkit.lxc import Lxc
from lxdkit.distros import validate_distro_version
from lxdkit.ssh import configure_ssh
from lxdkit.databases import REDIS

validate_distro_version("debian", "bookworm")
lxc = Lxc()
lxc.launch("debian-bookworm", "work")
configure_ssh(lxc, "work", "debian", "bookworm")
REDIS.configure(lxc, "work", "debian", "bookworm")
```

## Supported distributions

`lxdkit.distros.SUPPORTED_DISTROS` lists the supported distributions and their
versions. `validate_distro_version` raises `UnsupportedDistroError`, a
`ValueError`, for any other pair. `version_optimizations` returns the extra
repository commands for a distribution and version.

| distro      | versions                          |
|-------------|-----------------------------------|
| ubuntu      | jammy, noble, plucky              |
| debian      | bullseye, bookworm, trixie        |
| centos      | 9-Stream, 10-Stream               |
| fedora      | 41, 42                            |
| almalinux   | 8, 9, 10                          |
| rockylinux  | 8, 9, 10                          |
| oracle      | 8, 9                              |
| opensuse    | 15.5, 15.6, tumbleweed            |
| alpine      | 3.19, 3.20, 3.21, 3.22, edge      |
| amazonlinux | 2023                              |

## Error catalogue

`lxdkit.errors.ErrorCode` is an `IntEnum` of application error codes.
`get_error_message(code)` returns the English message for a code.
`get_suggestion(code)` returns the user-facing hint. Unknown codes get a
generic message and hint.

`AppError(func_name, code, message, cause=None)` is an exception. It formats as
`[func] message: detail (code: N)`. `with_context` and `with_trace_id` attach
extra data and return the same error.

## What it does not do

lxdkit has no command-line program. It does not download rootfs or metadata
tarballs, generate image metadata, or build and export images by itself. It
only provides the building blocks above for working with containers and images
that `lxc` already knows about.