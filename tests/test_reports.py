import pytest

from contractdesk.reports import HtmlReport, PdfReport, Report


def test_html_report_runs_steps_in_order(capsys):
    HtmlReport().generate()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Gathering data for HTML report...",
        "Formatting report as HTML...",
        "Saving report as HTML file...",
    ]


def test_pdf_report_runs_steps_in_order(capsys):
    PdfReport().generate()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Gathering data for PDF report...",
        "Formatting report as PDF...",
        "Saving report as PDF file...",
    ]


def test_single_step_prints_only_its_line(capsys):
    PdfReport().format_report()
    assert capsys.readouterr().out == "Formatting report as PDF...\n"


@pytest.mark.parametrize(
    ("step", "expected"),
    [
        ("gather_data", "Gathering data for HTML report...\n"),
        ("format_report", "Formatting report as HTML...\n"),
        ("save_report", "Saving report as HTML file...\n"),
    ],
)
def test_html_steps_print_their_line(capsys, step, expected):
    getattr(HtmlReport(), step)()
    assert capsys.readouterr().out == expected


def test_report_is_abstract():
    with pytest.raises(TypeError):
        Report()