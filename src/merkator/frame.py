"""Do coordinate things to pandas DataFrames and Series"""
import numpy as np
import pandas as pd
from . import coordinate
from . import errors as merrors
from . import geo


error_modes = ["raise", "coerce"]


def parse_series(series, errors="raise"):
    """
    Parse a Series of coordinate strings into a DataFrame of lon, lat.

    Missing values stay NaN. With errors="coerce" unparseable strings become
    NaN as well, with errors="raise" they raise InvalidCoordinateFormat.
    """
    if errors not in error_modes:
        raise ValueError(f"valid values for 'errors' are {error_modes}")

    def _parse(text):
        try:
            c = coordinate.parse(text)
        except merrors.InvalidCoordinateFormat:
            if errors == "coerce":
                return (np.nan, np.nan)
            raise
        return (c.longitude, c.latitude)

    pairs = series.map(_parse, na_action="ignore")
    lons = pairs.map(lambda p: p[0], na_action="ignore")
    lats = pairs.map(lambda p: p[1], na_action="ignore")
    return pd.DataFrame(
        {"lon": lons.astype(float), "lat": lats.astype(float)},
        index=series.index
    )


def convert_coordinates(df, column="coord"):
    """Return a copy of df with lon and lat columns parsed from column."""
    newdf = df.copy(deep=True)
    parsed = parse_series(df[column])
    newdf["lon"] = parsed["lon"]
    newdf["lat"] = parsed["lat"]
    return newdf


def has_sexagesimal(series):
    """Does this Series contain any sexagesimal coordinate strings?"""
    return bool(series.map(geo.is_sexagesimal, na_action="ignore").fillna(False).any())


def has_decimal(series):
    """Does this Series contain any decimal coordinate strings?"""
    return bool(series.map(geo.is_decimal, na_action="ignore").fillna(False).any())


def to_wkt(df, lon="lon", lat="lat"):
    """Series of WKT point strings, None where lon or lat is missing."""
    def _wkt(row):
        if pd.isna(row[lon]) or pd.isna(row[lat]):
            return None
        return coordinate.Coordinate(row[lon], row[lat]).to_wkt()

    return pd.Series([_wkt(row) for _, row in df.iterrows()], index=df.index, dtype=object)
