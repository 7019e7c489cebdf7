"""Operations - the update routines."""

from .brew import update_brew
from .dotfiles import update_dotfiles
from .nvim import update_nvim
from .zsh import update_zsh

__all__ = [
    "update_brew",
    "update_dotfiles",
    "update_nvim",
    "update_zsh",
]
