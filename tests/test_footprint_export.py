"""Tests for .kicad_mod export of PLCC plug footprints."""

import json
from pathlib import Path

import pytest

from kicad_plcc.exceptions import ExportError, PlccError
from kicad_plcc.library import create_plcc
from kicad_plcc.library.footprint import line_to_sexp, model_to_sexp, pad_to_sexp, text_to_sexp
from kicad_plcc.library.geometry import ZERO_TIMESTAMP, LineSegment, Point

TSTAMP = "(tstamp 00000000-0000-0000-0000-000000000000)"

FIXTURES = Path(__file__).parent / "fixtures"


def _lines(fp):
    return fp.to_sexp().splitlines()


class TestRecords:
    """Tests for single record rendering."""

    def test_line_record(self):
        line = LineSegment(Point(-18.3, -18.3), Point(18.3, -18.3), 0.05, "F.CrtYd")
        assert line_to_sexp(line, ZERO_TIMESTAMP) == (
            '  (fp_line (start -18.300 -18.300) (end 18.300 -18.300) (layer "F.CrtYd")'
            f" (width 0.05) {TSTAMP})\n"
        )

    def test_text_record(self):
        text = text_to_sexp("value", "APW9322", Point(0.0, 9.0), "F.Fab", ZERO_TIMESTAMP)
        assert text.splitlines() == [
            '  (fp_text value "APW9322" (at 0 9.000 -180) (layer "F.Fab")',
            "    (effects (font (size 1.000 1.000) (thickness 0.15)))",
            "    (tstamp 00000000-0000-0000-0000-000000000000)",
            "  )",
        ]

    def test_smd_pad_record(self):
        fp = create_plcc(pins=84, double_sided=False)
        assert pad_to_sexp(fp.geometry.pads[0], ZERO_TIMESTAMP) == (
            '  (pad "1" smd rect (at 0.000 -16.025) (locked) (size 0.900 4.550)'
            f' (layers "F.Cu" "F.Paste" "F.Mask") {TSTAMP})\n'
        )

    def test_through_hole_pad_record(self):
        fp = create_plcc(pins=28)
        assert pad_to_sexp(fp.geometry.pads[0], ZERO_TIMESTAMP) == (
            '  (pad "1" thru_hole rect (at 0.000 -7.919) (locked) (size 0.900 3.125)'
            ' (drill 0.3 (offset 0.000 0.781)) (layers "*.Cu" "*.Mask")'
            f" {TSTAMP})\n"
        )

    def test_via_inside_pad_record(self):
        """A reversed zero offset component prints with its sign."""
        fp = create_plcc(pins=28, via_outside=False)
        record = pad_to_sexp(fp.geometry.pads[0], ZERO_TIMESTAMP)
        assert "(at 0.000 -6.356)" in record
        assert "(drill 0.3 (offset -0.000 -0.781))" in record


class TestReferenceOutput:
    """Full documents compared with footprints from the reference generator."""

    @pytest.mark.parametrize(
        "fixture, pins, options",
        [
            ("APW9328.kicad_mod", 84, {}),
            ("APW9328_smd.kicad_mod", 84, {"double_sided": False}),
            ("APW9328_via_inside.kicad_mod", 84, {"via_outside": False}),
            ("APW9322.kicad_mod", 20, {}),
        ],
    )
    def test_matches_reference(self, fixture, pins, options):
        expected = (FIXTURES / fixture).read_text()
        assert create_plcc(pins=pins, **options).to_sexp() == expected

    def test_saved_file_matches_reference(self, tmp_path):
        path = create_plcc(pins=84).save(tmp_path / "APW9328.kicad_mod")
        assert path.read_bytes() == (FIXTURES / "APW9328.kicad_mod").read_bytes()


class TestDocument:
    """Tests for the complete footprint document."""

    def test_header(self):
        lines = _lines(create_plcc(pins=84))
        assert lines[:6] == [
            '(footprint "APW9328" (version 20210228) (generator pcbnew) (layer "F.Cu")',
            "  (tedit 60690F97)",
            '  (descr "PLCC plug, 84 pins, surface mount")',
            '  (tags "plcc smt")',
            "  (autoplace_cost180 1)",
            "  (attr smd)",
        ]

    def test_text_records(self):
        lines = _lines(create_plcc(pins=84))
        assert lines[6] == '  (fp_text reference "IC2" (at 0 -19.300 -180) (layer "F.SilkS")'
        assert lines[10] == '  (fp_text value "APW9328" (at 0 19.800 -180) (layer "F.Fab")'
        assert lines[14] == '  (fp_text user "${REFERENCE}" (at 0 0.525 -180) (layer "F.Fab")'

    def test_record_order(self):
        lines = _lines(create_plcc(pins=84))
        body = lines[18:]

        front = body[:15]
        back = body[15:30]
        crtyd = body[30:34]
        fab = body[34:50]
        pads = body[50:134]

        assert all('"F.SilkS"' in line for line in front)
        assert all('"B.SilkS"' in line for line in back)
        assert all('"F.CrtYd"' in line for line in crtyd)
        assert all('"F.Fab"' in line for line in fab)
        assert [line.split('"')[1] for line in pads] == [str(n) for n in range(1, 85)]

    def test_outline_records_84(self):
        lines = _lines(create_plcc(pins=84))
        assert lines[18] == (
            '  (fp_line (start 18.500 -17.500) (end 18.500 18.500) (layer "F.SilkS")'
            f" (width 0.12) {TSTAMP})"
        )
        assert lines[24] == (
            '  (fp_line (start 13.675 -14.800) (end 14.175 -14.800) (layer "F.SilkS")'
            f" (width 0.1) {TSTAMP})"
        )
        assert lines[48] == (
            '  (fp_line (start -18.300 -18.300) (end 18.300 -18.300) (layer "F.CrtYd")'
            f" (width 0.05) {TSTAMP})"
        )
        assert lines[52] == (
            '  (fp_line (start -18.000 -17.475) (end 17.000 -17.475) (layer "F.Fab")'
            f" (width 0.1) {TSTAMP})"
        )

    def test_model_record(self):
        """The KiCad path variable is written literally."""
        assert model_to_sexp(84).splitlines()[0] == (
            '(model "${KISYS3DMOD}/Package_LCC.3dshapes/PLCC-84_SMD-Socket.wrl"'
        )
        assert "PLCC-20_SMD-Socket.wrl" in model_to_sexp(20)

    def test_model_and_close(self):
        lines = _lines(create_plcc(pins=84))
        assert lines[-6:] == [
            '(model "${KISYS3DMOD}/Package_LCC.3dshapes/PLCC-84_SMD-Socket.wrl"',
            "    (offset (xyz 0 0 0))",
            "    (scale (xyz 1 1 1))",
            "    (rotate (xyz 0 0 0))",
            "  )",
            ")",
        ]

    @pytest.mark.parametrize("pins", [20, 28, 32, 44, 52, 68, 84])
    def test_line_count(self, pins):
        """Header, texts, 50 outline lines, one line per pad, model, close."""
        text = create_plcc(pins=pins).to_sexp()
        assert text.endswith(")\n")
        assert len(text.splitlines()) == 6 + 12 + 50 + pins + 5 + 1

    def test_smd_output_has_no_drills(self):
        text = create_plcc(pins=44, double_sided=False).to_sexp()
        assert "drill" not in text
        assert "thru_hole" not in text
        assert text.count(" smd rect ") == 44

    def test_custom_timestamp_and_reference(self):
        tstamp = "12345678-1234-1234-1234-123456789abc"
        fp = create_plcc(pins=20, timestamp=tstamp, reference="U7")
        text = fp.to_sexp()
        assert ZERO_TIMESTAMP not in text
        assert text.count(f"(tstamp {tstamp})") == 3 + 50 + 20
        assert '(fp_text reference "U7"' in text

    def test_deterministic(self):
        assert create_plcc(pins=52).to_sexp() == create_plcc(pins=52).to_sexp()


class TestSave:
    """Tests for writing footprint files."""

    def test_save(self, tmp_path):
        fp = create_plcc(pins=20)
        path = fp.save(tmp_path / "APW9322.kicad_mod")

        assert path.exists()
        assert path.read_text() == fp.to_sexp()

    def test_save_creates_directories(self, tmp_path):
        fp = create_plcc(pins=20)
        path = fp.save(str(tmp_path / "PLCC.pretty" / "APW9322.kicad_mod"))
        assert path.parent.is_dir()
        assert path.name == "APW9322.kicad_mod"

    def test_save_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(ExportError) as exc_info:
            create_plcc(pins=20).save(blocker / "out.kicad_mod")

        err = exc_info.value
        assert isinstance(err, PlccError)
        assert "Cannot write footprint file" in str(err)
        assert err.context["file"] == str(blocker / "out.kicad_mod")


class TestToDict:
    """Tests for the JSON summary."""

    def test_summary(self):
        data = create_plcc(pins=84).to_dict()
        assert data["name"] == "APW9328"
        assert data["pins"] == 84
        assert data["double_sided"] is True
        assert data["via_outside"] is True
        assert len(data["pads"]) == 84
        assert data["lines"] == {"silkscreen": 30, "courtyard": 4, "fabrication": 16}

    def test_pad_entries(self):
        data = create_plcc(pins=20).to_dict()
        pad = data["pads"][0]
        assert pad["number"] == 1
        assert pad["type"] == "thru_hole"
        assert pad["drill"] == 0.3
        assert pad["drill_offset"][1] == pytest.approx(0.7875)

        smd = create_plcc(pins=20, double_sided=False).to_dict()["pads"][0]
        assert smd["type"] == "smd"
        assert "drill" not in smd

    def test_json_serializable(self):
        data = create_plcc(pins=32).to_dict()
        assert json.loads(json.dumps(data)) == data
