from linkcrawl.report import format_report


def test_report_numbers_links_with_three_digits():
    report = format_report(["https://example.com/a", "https://example.com/b"])
    assert report == (
        "Links\n"
        "-----\n"
        "001. https://example.com/a\n"
        "002. https://example.com/b\n"
        "\n"
    )


def test_report_without_links_has_header_only():
    assert format_report([]) == "Links\n-----\n\n"


def test_report_ordinals_grow_past_three_digits():
    links = [f"https://example.com/{i}" for i in range(1000)]
    lines = format_report(links).splitlines()
    assert lines[2] == "001. https://example.com/0"
    assert lines[-3] == "999. https://example.com/998"
    assert lines[-2] == "1000. https://example.com/999"
    assert lines[-1] == ""
