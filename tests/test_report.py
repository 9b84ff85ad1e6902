from shapecalc.geometry import Circle, Square
from shapecalc.rendering import KEYWORDS_DEMONSTRATED, ReportRenderer
from shapecalc.validation import Err, Ok


def test_constants_block():
    assert ReportRenderer().constants_block() == [
        "Mathematical Constants:",
        "  PI = 3.14159265359",
        "  Golden Ratio = 1.618033988749",
        "",
    ]


def test_rule_width():
    assert ReportRenderer().rule() == ["-" * 60]
    assert ReportRenderer(rule_width=12).rule() == ["-" * 12]


def test_shape_block_formats_two_decimals():
    assert ReportRenderer().shape_block(Circle(radius=5.0)) == [
        "Circle with radius 5.00",
        "  Area:      78.54",
        "  Perimeter: 31.42",
        "",
    ]
    assert ReportRenderer().shape_block(Square(side=7.0))[1:3] == [
        "  Area:      49.00",
        "  Perimeter: 28.00",
    ]


def test_invalid_shape_line():
    assert ReportRenderer().invalid_shape("Square side must be positive") == [
        "Invalid shape: Square side must be positive",
        "",
    ]


def test_ratio_lines():
    renderer = ReportRenderer()
    assert renderer.ratio_line(16.0, 9.0, Ok(16.0 / 9.0)) == ["  16.0 / 9.0 = 1.778"]
    assert renderer.ratio_line(-5.0, 10.0, Err("Width must be positive")) == [
        "  -5.0 / 10.0 = Error: Width must be positive"
    ]


def test_summary_block_lists_each_keyword():
    lines = ReportRenderer().summary_block()
    assert lines[:2] == ["", "Keywords Demonstrated:"]
    assert len(lines) == 2 + len(KEYWORDS_DEMONSTRATED)
    assert all(line.startswith("  ✓ ") for line in lines[2:])
    assert lines[-1].endswith("Early returns in validate_shape() and calculate_efficiency_ratio()")
    # Descriptions line up in one column
    assert len({line.index(" - ") for line in lines[2:]}) == 1
