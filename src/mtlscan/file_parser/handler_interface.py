# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod

from .fast_float import FastFloat


class IMTLScannerHandler(ABC):
    """
    Abstract Base Class for MTL scan events.
    Allows decoupling the scanner from whatever builds the final material model.

    The scanner invokes exactly one method per recognized, well-formed line.
    Exceptions raised by an implementation propagate out of the scan unchanged.
    """

    @abstractmethod
    def on_comment(self, comment: str):
        """
        Called for a comment line.

        Args:
            comment: Text following the ``#`` marker, leading whitespace removed.
        """
        pass

    @abstractmethod
    def on_material(self, name: str):
        """
        Called for ``newmtl``; every following event belongs to this material.

        Args:
            name: Material name.
        """
        pass

    @abstractmethod
    def on_ambient_color_rgb(self, r: float, g: float, b: float):
        """Called for an RGB ``Ka`` line."""
        pass

    @abstractmethod
    def on_diffuse_color_rgb(self, r: float, g: float, b: float):
        """Called for an RGB ``Kd`` line."""
        pass

    @abstractmethod
    def on_specular_color_rgb(self, r: float, g: float, b: float):
        """Called for an RGB ``Ks`` line."""
        pass

    @abstractmethod
    def on_transmission_color_rgb(self, r: float, g: float, b: float):
        """Called for an RGB ``Tf`` line."""
        pass

    @abstractmethod
    def on_dissolve(self, amount: FastFloat):
        """
        Called for ``d``.

        Args:
            amount: Lazy dissolve factor. Reading ``amount.value`` raises
                WFCorruptException if the text is not a number.
        """
        pass

    @abstractmethod
    def on_sharpness(self, amount: FastFloat):
        """Called for ``sharpness`` with the lazy sharpness factor."""
        pass

    @abstractmethod
    def on_illumination(self, illumination: FastFloat):
        """Called for ``illum`` with the lazy illumination model index."""
        pass

    @abstractmethod
    def on_specular_exponent(self, amount: FastFloat):
        """Called for ``Ns`` with the lazy specular exponent."""
        pass

    @abstractmethod
    def on_ambient_texture(self, filename: str):
        pass

    @abstractmethod
    def on_diffuse_texture(self, filename: str):
        pass

    @abstractmethod
    def on_specular_texture(self, filename: str):
        pass

    @abstractmethod
    def on_specular_exponent_texture(self, filename: str):
        pass

    @abstractmethod
    def on_dissolve_texture(self, filename: str):
        pass

    @abstractmethod
    def on_bump_texture(self, filename: str):
        pass

    @abstractmethod
    def on_reflection_texture(self, filename: str):
        pass
