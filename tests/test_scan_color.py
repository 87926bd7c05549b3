"""Tests for color command classification."""

import pytest

from mtlscan.file_parser import ColorForm, ScanColor, ScanCommand, WFCorruptException


def _process(line: str) -> ScanColor:
    color = ScanColor()
    color.process(ScanCommand().parse(line))
    return color


class TestRgb:
    def test_three_numbers_are_rgb(self) -> None:
        color = _process("Kd 0.8 0.1 0.2")
        assert color.is_rgb()
        assert color.form is ColorForm.RGB
        assert (color.r, color.g, color.b) == pytest.approx((0.8, 0.1, 0.2))

    def test_values_outside_unit_range_are_kept(self) -> None:
        color = _process("Ka 2 -1 0.5")
        assert (color.r, color.g, color.b) == pytest.approx((2.0, -1.0, 0.5))

    def test_malformed_component_raises(self) -> None:
        with pytest.raises(WFCorruptException):
            _process("Kd 0.1 oops 0.3")


class TestNonRgb:
    @pytest.mark.parametrize("line", ["Kd", "Kd 0.5", "Kd 0.1 0.2", "Kd 0.1 0.2 0.3 0.4"])
    def test_other_parameter_counts_are_not_rgb(self, line: str) -> None:
        color = _process(line)
        assert not color.is_rgb()
        assert color.form is ColorForm.UNSUPPORTED

    def test_xyz_form(self) -> None:
        color = _process("Kd xyz 0.1 0.2 0.3")
        assert color.form is ColorForm.XYZ
        assert not color.is_rgb()

    def test_spectral_form(self) -> None:
        assert _process("Ka spectral ident.rfl 1.0").form is ColorForm.SPECTRAL

    def test_three_parameter_spectral_is_not_parsed_as_rgb(self) -> None:
        assert _process("Ks spectral a.rfl").form is ColorForm.SPECTRAL


class TestReset:
    def test_state_reset_between_commands(self) -> None:
        color = ScanColor()
        command = ScanCommand()
        color.process(command.parse("Kd 1 1 1"))
        assert color.is_rgb()
        color.process(command.parse("Kd 1"))
        assert not color.is_rgb()
        assert (color.r, color.g, color.b) == (0.0, 0.0, 0.0)
