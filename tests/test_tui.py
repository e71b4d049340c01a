from code_snapshot.tui.enums import VERDICT_STYLE, CheckVerdict, UIStyle


def test_ui_styles_are_the_ones_rendered() -> None:
    assert {style.value for style in UIStyle} == {"blue", "green", "yellow", "red", "dim"}


def test_every_verdict_has_a_style() -> None:
    assert set(VERDICT_STYLE) == set(CheckVerdict)
    assert set(VERDICT_STYLE.values()) <= {style.value for style in UIStyle}
