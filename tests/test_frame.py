import numpy as np
import pandas as pd
import pytest
import merkator as mk

# pylint: disable=redefined-outer-name


@pytest.fixture()
def coords():
    return pd.Series(
        ["45:34:21 N 120:47:23 E", "34.45456 -101.21354", None, "0 0"],
        index=[10, 11, 12, 13]
    )


def test_parse_series(coords):
    df = mk.frame.parse_series(coords)
    assert list(df.columns) == ["lon", "lat"]
    assert list(df.index) == [10, 11, 12, 13]
    assert df.loc[10, "lat"] == pytest.approx(45.5725)
    assert df.loc[10, "lon"] == pytest.approx(120.789722, abs=1e-6)
    assert df.loc[11, "lat"] == 34.45456
    assert df.loc[11, "lon"] == -101.21354
    assert np.isnan(df.loc[12, "lat"])
    assert np.isnan(df.loc[12, "lon"])
    assert df.loc[13, "lat"] == 0
    assert df.loc[13, "lon"] == 0


def test_parse_series_raise():
    s = pd.Series(["34.45456 -101.21354", "not a coordinate"])
    with pytest.raises(mk.errors.InvalidCoordinateFormat):
        _ = mk.frame.parse_series(s)


def test_parse_series_coerce():
    s = pd.Series(["34.45456 -101.21354", "not a coordinate"])
    df = mk.frame.parse_series(s, errors="coerce")
    assert df.loc[0, "lat"] == 34.45456
    assert df["lat"].isna().tolist() == [False, True]
    assert df["lon"].isna().tolist() == [False, True]


def test_parse_series_bad_errors_arg(coords):
    with pytest.raises(ValueError):
        _ = mk.frame.parse_series(coords, errors="ignore")


def test_parse_series_empty():
    df = mk.frame.parse_series(pd.Series([], dtype=object))
    assert len(df) == 0
    assert list(df.columns) == ["lon", "lat"]


def test_convert_coordinates(coords):
    df = pd.DataFrame({"name": ["a", "b", "c", "d"], "coord": coords})
    newdf = mk.frame.convert_coordinates(df)
    assert "lon" not in df.columns
    assert list(newdf.columns) == ["name", "coord", "lon", "lat"]
    assert newdf.loc[11, "lon"] == -101.21354
    assert newdf.loc[11, "lat"] == 34.45456


def test_has_notation(coords):
    assert mk.frame.has_sexagesimal(coords) is True
    assert mk.frame.has_decimal(coords) is True
    decimals = pd.Series(["34.45456 -101.21354", None])
    assert mk.frame.has_sexagesimal(decimals) is False
    assert mk.frame.has_decimal(decimals) is True
    assert mk.frame.has_decimal(pd.Series([None, "foo"])) is False


def test_to_wkt():
    df = pd.DataFrame({
        "lon": [-101.21354, np.nan, 0.0],
        "lat": [34.45456, 1.0, 0.0]
    })
    wkt = mk.frame.to_wkt(df)
    assert wkt.tolist() == ["POINT(-101.21354 34.45456)", None, "POINT(0.0 0.0)"]
    assert wkt.dtype == object
    assert wkt.iloc[1] is None
    assert list(wkt.index) == [0, 1, 2]


def test_to_wkt_columns():
    df = pd.DataFrame({"x": [10.0], "y": [20.0]})
    assert mk.frame.to_wkt(df, lon="x", lat="y").tolist() == ["POINT(10.0 20.0)"]


def test_to_wkt_empty():
    df = pd.DataFrame({"lon": [], "lat": []})
    wkt = mk.frame.to_wkt(df)
    assert len(wkt) == 0
    assert wkt.dtype == object


def test_to_wkt_all_missing():
    df = pd.DataFrame({"lon": [np.nan, 10.0], "lat": [1.0, np.nan]}, index=[5, 6])
    wkt = mk.frame.to_wkt(df)
    assert list(wkt.index) == [5, 6]
    assert wkt.iloc[0] is None
    assert wkt.iloc[1] is None
