from bikram_sambat.cli import format_month, main


def test_to_bs(capsys):
    assert main(["to-bs", "2025-02-25"]) == 0
    assert capsys.readouterr().out.strip() == "2081-11-13  13 Mangalbar Falgun 2081"


def test_to_bs_in_nepali(capsys):
    assert main(["--nepali", "to-bs", "2025-02-25"]) == 0
    assert capsys.readouterr().out.strip() == "2081-11-13  १३ मङ्गलबार फाल्गुन २०८१"


def test_to_ad(capsys):
    assert main(["to-ad", "2081-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "2024-04-13  Saturday, April 13, 2024"


def test_range(capsys):
    assert main(["range"]) == 0
    assert capsys.readouterr().out.strip() == "BS 2000-2090  (1943-04-14 to 2034-04-13)"


def test_out_of_range_date_exits_with_error(capsys):
    assert main(["to-ad", "2100-01-01"]) == 2
    assert "outside the supported range" in capsys.readouterr().err


def test_format_month():
    lines = format_month(2081, 10)
    assert lines[0].strip() == "Falgun 2081"
    assert lines[1] == "Sun Mon Tue Wed Thu Fri Sat"
    assert lines[2] == " ".join(["   "] * 4 + ["  1", "  2", " 3*"])
    assert lines[-2].split() == ["18", "19", "20", "21", "22", "23", "24*"]
    assert lines[-1].split() == ["25", "26", "27", "28", "29", "30"]


def test_format_month_outside_table_is_marked():
    assert format_month(2100, 0)[0].strip().endswith("(approx.)")


def test_format_month_in_nepali():
    lines = format_month(2081, 10, "nepali")
    assert lines[0].strip() == "फाल्गुन २०८१"
    assert lines[2].split() == ["१", "२", "३*"]
