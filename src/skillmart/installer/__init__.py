"""Copy catalog skills into the installed-skills root."""

from .install import default_install_root, install_skill

__all__ = ["default_install_root", "install_skill"]
