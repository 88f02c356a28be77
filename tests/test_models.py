import math

import numpy as np
import pytest

from xyzchem import (
    Atom,
    InvalidPositionData,
    MissingLabelOrValue,
    NoAtomSymbol,
    NoPositionData,
    Position,
    Record,
    XYZFile,
)


class TestAtom:
    """Tests for parsing and formatting single atom lines."""

    def test_parse_tab_separated(self):
        atom = Atom.from_line("C\t2.2453\t4.56\t5")
        assert atom == Atom("C", Position(2.2453, 4.56, 5.0))

    def test_parse_mixed_whitespace_ignores_extra_tokens(self):
        atom = Atom.from_line("  Ne   1.0 \t -2.5e-1  3   extra 7\n")
        assert atom.label == "Ne"
        assert atom.position == Position(1.0, -0.25, 3.0)

    def test_leading_whitespace_leaves_a_value_missing(self):
        with pytest.raises(MissingLabelOrValue):
            Atom.from_line("\t2.2453\t4.56\t5")

    def test_comma_decimal_separator_is_invalid(self):
        with pytest.raises(InvalidPositionData) as excinfo:
            Atom.from_line("C\t2,2453\t4.56\t5", line_number=7)
        assert excinfo.value.line == 7
        assert "2,2453" in str(excinfo.value)

    def test_empty_line_has_no_symbol(self):
        with pytest.raises(NoAtomSymbol) as excinfo:
            Atom.from_line("   ", line_number=3)
        assert excinfo.value.line == 3
        assert str(excinfo.value).endswith("at line 3")

    def test_missing_coordinate(self):
        with pytest.raises(NoPositionData):
            Atom.from_line("C 1.0 2.0")

    def test_nan_and_infinity_are_accepted(self):
        atom = Atom.from_line("X nan inf -inf")
        assert math.isnan(atom.position.x)
        assert atom.position.y == math.inf
        assert atom.position.z == -math.inf

    def test_format_uses_tabs(self):
        atom = Atom("C", Position(2.2453, 4.56, 5.0))
        assert str(atom) == "C\t2.2453\t4.56\t5.0"

    def test_atoms_are_immutable(self):
        atom = Atom("C", Position(0.0, 0.0, 0.0))
        with pytest.raises(AttributeError):
            atom.label = "N"

    @pytest.mark.parametrize(
        "line", ["C 1_0 0 0", "C \uff11 0 0", "C \u0661.5 0 0", "C 0x1p3 0 0", "C 1e 0 0"]
    )
    def test_non_ascii_or_grouped_numbers_are_invalid(self, line):
        with pytest.raises(InvalidPositionData):
            Atom.from_line(line)

    @pytest.mark.parametrize(
        "token, value", [("5.", 5.0), (".5", 0.5), ("+1E3", 1000.0), ("-2.5e-1", -0.25)]
    )
    def test_ascii_float_forms(self, token, value):
        assert Atom.from_line(f"C {token} 0 0").position.x == value

    def test_infinity_spelled_out(self):
        assert Atom.from_line("C Infinity -INF NaN").position.x == math.inf

    @pytest.mark.parametrize("label", ["", "  ", "A B", " C", "H\n"])
    def test_label_must_be_single_token(self, label):
        with pytest.raises(ValueError):
            Atom(label, Position(0.0, 0.0, 0.0))

    def test_symbol_is_label(self):
        assert Atom.from_line("Fe 0 0 0").symbol == "Fe"

    def test_position_to_array(self):
        np.testing.assert_array_equal(
            Position(1.0, -2.0, 0.5).to_array(), np.array([1.0, -2.0, 0.5])
        )


class TestRecord:
    """Tests for the record model."""

    def test_from_arrays(self):
        record = Record.from_arrays(
            ["O", "H"], np.array([[0.0, 0.0, 0.1], [0.0, 0.7, -0.4]]), "water"
        )
        assert record.count == 2
        assert record.is_consistent
        assert record.labels == ["O", "H"]
        np.testing.assert_array_almost_equal(
            record.positions, [[0.0, 0.0, 0.1], [0.0, 0.7, -0.4]]
        )

    def test_from_arrays_length_mismatch(self):
        with pytest.raises(ValueError):
            Record.from_arrays(["O"], [[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])

    def test_declared_count_kept_apart_from_atoms(self):
        record = Record(4, "declared four", [Atom("H", Position(0.0, 0.0, 0.0))])
        assert record.declared_count == 4
        assert len(record) == 1

    def test_empty_record_positions_shape(self):
        record = Record(0, "empty")
        assert len(record) == 0
        assert record.positions.shape == (0, 3)

    def test_atoms_stored_as_tuple(self):
        record = Record(1, "", [Atom("H", Position(0.0, 0.0, 0.0))])
        assert isinstance(record.atoms, tuple)

    def test_str_uses_actual_atom_count(self):
        record = Record(5, "mismatch", [Atom("H", Position(0.0, 0.0, 1.0))])
        assert not record.is_consistent
        assert str(record) == "1\nmismatch\nH\t0.0\t0.0\t1.0\n"


class TestXYZFile:
    """Tests for the container model."""

    def test_trajectory_shape(self):
        frames = XYZFile(
            [
                Record.from_arrays(["H", "H"], [[0, 0, 0], [0, 0, 0.74]]),
                Record.from_arrays(["H", "H"], [[0, 0, 0], [0, 0, 0.80]]),
            ]
        )
        trajectory = frames.trajectory()
        assert trajectory.shape == (2, 2, 3)
        assert trajectory[1, 1, 2] == pytest.approx(0.80)

    def test_trajectory_requires_equal_counts(self):
        frames = XYZFile(
            [
                Record.from_arrays(["H"], [[0, 0, 0]]),
                Record.from_arrays(["H", "H"], [[0, 0, 0], [0, 0, 1]]),
            ]
        )
        with pytest.raises(ValueError):
            frames.trajectory()

    def test_indexing_and_slicing(self):
        records = [Record(0, f"frame {i}") for i in range(3)]
        frames = XYZFile(records)
        assert frames.n_records == 3
        assert frames[1].comment == "frame 1"
        assert isinstance(frames[1:], XYZFile)
        assert [r.comment for r in frames[1:]] == ["frame 1", "frame 2"]
