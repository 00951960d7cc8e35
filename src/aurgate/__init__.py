"""aurgate - resolution and acquisition core for pacman + AUR packages."""

__version__ = "0.1.0"
