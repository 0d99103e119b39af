"""Supported distributions and version-specific repository tweaks."""

from __future__ import annotations

SUPPORTED_DISTROS: dict[str, list[str]] = {
    "ubuntu": ["jammy", "noble", "plucky"],
    "debian": ["bullseye", "bookworm", "trixie"],
    "centos": ["9-Stream", "10-Stream"],
    "fedora": ["41", "42"],
    "almalinux": ["8", "9", "10"],
    "rockylinux": ["8", "9", "10"],
    "oracle": ["8", "9"],
    "opensuse": ["15.5", "15.6", "tumbleweed"],
    "alpine": ["3.19", "3.20", "3.21", "3.22", "edge"],
    "amazonlinux": ["2023"],
}

_CRB = "dnf config-manager --set-enabled crb 2>/dev/null || true"
_POWERTOOLS = "dnf config-manager --set-enabled powertools 2>/dev/null || true"

_OPTIMIZATIONS: dict[tuple[str, str], list[str]] = {
    ("centos", "9-Stream"): [_CRB],
    ("centos", "10-Stream"): [_CRB],
    ("almalinux", "8"): [_POWERTOOLS],
    ("almalinux", "9"): [_CRB],
    ("almalinux", "10"): [_CRB],
    ("rockylinux", "8"): [_POWERTOOLS],
    ("rockylinux", "9"): [_CRB],
    ("rockylinux", "10"): [_CRB],
    ("oracle", "7"): ["yum-config-manager --enable ol7_optional_latest 2>/dev/null || true"],
    ("oracle", "8"): ["dnf config-manager --set-enabled ol8_codeready_builder 2>/dev/null || true"],
    ("oracle", "9"): ["dnf config-manager --set-enabled ol9_codeready_builder 2>/dev/null || true"],
}


class UnsupportedDistroError(ValueError):
    """Raised for a distribution or version that cannot be built."""


def validate_distro_version(distro: str, version: str) -> None:
    """Raise UnsupportedDistroError unless the distro/version pair is supported."""
    versions = SUPPORTED_DISTROS.get(distro)
    if versions is None:
        raise UnsupportedDistroError(
            f"不支持的发行版: {distro}，支持的发行版: "
            "ubuntu, debian, centos, fedora, almalinux, rockylinux, oracle, opensuse, alpine, amazonlinux"
        )
    if version not in versions:
        raise UnsupportedDistroError(
            f"不支持的 {distro} 版本: {version}，支持的版本: {', '.join(versions)}"
        )


def version_optimizations(distro: str, version: str) -> list[str]:
    """Return extra repository commands for a distro/version, possibly none."""
    return list(_OPTIMIZATIONS.get((distro, version), []))