# -*- coding: utf-8 -*-
"""
MTL Events
把回调形式的扫描结果收集为按顺序排列的事件列表，便于下游以循环方式消费
或在测试中断言。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Tuple

from .fast_float import FastFloat
from .handler_interface import IMTLScannerHandler


class MTLEventType(Enum):
    COMMENT = "comment"
    MATERIAL = "material"
    AMBIENT_COLOR_RGB = "ambient_color_rgb"
    DIFFUSE_COLOR_RGB = "diffuse_color_rgb"
    SPECULAR_COLOR_RGB = "specular_color_rgb"
    TRANSMISSION_COLOR_RGB = "transmission_color_rgb"
    DISSOLVE = "dissolve"
    SHARPNESS = "sharpness"
    ILLUMINATION = "illumination"
    SPECULAR_EXPONENT = "specular_exponent"
    AMBIENT_TEXTURE = "ambient_texture"
    DIFFUSE_TEXTURE = "diffuse_texture"
    SPECULAR_TEXTURE = "specular_texture"
    SPECULAR_EXPONENT_TEXTURE = "specular_exponent_texture"
    DISSOLVE_TEXTURE = "dissolve_texture"
    BUMP_TEXTURE = "bump_texture"
    REFLECTION_TEXTURE = "reflection_texture"


@dataclass(frozen=True)
class MTLEvent:
    """
    One scan event.

    Attributes:
        type: Which callback produced the event.
        payload: Callback arguments. RGB events hold (r, g, b); scalar events
            hold the still-lazy FastFloat; all others hold a single string.
    """
    type: MTLEventType
    payload: Tuple[Any, ...] = field(default_factory=tuple)

    @property
    def value(self) -> Any:
        """Single payload item, or the whole tuple for RGB events."""
        if len(self.payload) == 1:
            return self.payload[0]
        return self.payload


class MTLEventCollector(IMTLScannerHandler):
    """Handler that records every callback as an MTLEvent, in order."""

    def __init__(self):
        self.events: List[MTLEvent] = []

    def _emit(self, event_type: MTLEventType, *payload: Any) -> None:
        self.events.append(MTLEvent(event_type, payload))

    def on_comment(self, comment: str):
        self._emit(MTLEventType.COMMENT, comment)

    def on_material(self, name: str):
        self._emit(MTLEventType.MATERIAL, name)

    def on_ambient_color_rgb(self, r: float, g: float, b: float):
        self._emit(MTLEventType.AMBIENT_COLOR_RGB, r, g, b)

    def on_diffuse_color_rgb(self, r: float, g: float, b: float):
        self._emit(MTLEventType.DIFFUSE_COLOR_RGB, r, g, b)

    def on_specular_color_rgb(self, r: float, g: float, b: float):
        self._emit(MTLEventType.SPECULAR_COLOR_RGB, r, g, b)

    def on_transmission_color_rgb(self, r: float, g: float, b: float):
        self._emit(MTLEventType.TRANSMISSION_COLOR_RGB, r, g, b)

    def on_dissolve(self, amount: FastFloat):
        self._emit(MTLEventType.DISSOLVE, amount)

    def on_sharpness(self, amount: FastFloat):
        self._emit(MTLEventType.SHARPNESS, amount)

    def on_illumination(self, illumination: FastFloat):
        self._emit(MTLEventType.ILLUMINATION, illumination)

    def on_specular_exponent(self, amount: FastFloat):
        self._emit(MTLEventType.SPECULAR_EXPONENT, amount)

    def on_ambient_texture(self, filename: str):
        self._emit(MTLEventType.AMBIENT_TEXTURE, filename)

    def on_diffuse_texture(self, filename: str):
        self._emit(MTLEventType.DIFFUSE_TEXTURE, filename)

    def on_specular_texture(self, filename: str):
        self._emit(MTLEventType.SPECULAR_TEXTURE, filename)

    def on_specular_exponent_texture(self, filename: str):
        self._emit(MTLEventType.SPECULAR_EXPONENT_TEXTURE, filename)

    def on_dissolve_texture(self, filename: str):
        self._emit(MTLEventType.DISSOLVE_TEXTURE, filename)

    def on_bump_texture(self, filename: str):
        self._emit(MTLEventType.BUMP_TEXTURE, filename)

    def on_reflection_texture(self, filename: str):
        self._emit(MTLEventType.REFLECTION_TEXTURE, filename)
