import pytest

from acrotester.product_info import ProductInfo


def test_initial_rows():
    info = ProductInfo()
    assert len(info) == 12
    assert info.display(0) == "工单: ABCD123"
    assert info.display(11) == "用户: admin"


def test_lines_match_display():
    info = ProductInfo()
    assert info.lines() == [info.display(row) for row in range(len(info))]
    assert "UPH: 8000" in info.lines()


@pytest.mark.parametrize("row", [-1, 12, 100])
def test_display_out_of_range(row):
    with pytest.raises(IndexError):
        ProductInfo().display(row)


def test_update_value_changes_existing_entry():
    info = ProductInfo()
    assert info.update_value("数量", "2000") is True
    assert info.display(1) == "数量: 2000"
    assert len(info) == 12


def test_update_value_ignores_unknown_key():
    info = ProductInfo()
    before = info.lines()
    assert info.update_value("missing", "x") is False
    assert info.lines() == before


def test_leakage_rate_without_entry_leaves_data_unchanged():
    info = ProductInfo()
    before = info.lines()
    assert info.update_leakage_rate() is False
    assert info.lines() == before


def test_iteration_yields_pairs():
    pairs = list(ProductInfo())
    assert pairs[0] == ("工单", "ABCD123")
    assert len(pairs) == 12