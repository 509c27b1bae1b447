import logging
import sys
from pathlib import Path
from typing import Union

import pandas as pd

from fifa_analyzer.core.errors import InvalidPlayerData
from fifa_analyzer.core.store import PlayerSnapshot
from fifa_analyzer.data.attributes import CSV_COLUMN_MAP, NUMERIC_ATTRIBUTES

logger = logging.getLogger(__name__)


def read_players_csv(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read a futbin-style player export into a frame with snake_case columns.

    - headers are renamed via CSV_COLUMN_MAP (already snake_case headers pass through)
    - numeric columns are coerced, so blanks or junk become NaN, never 0
    - rows without a usable integer id are dropped
    - repeated ids keep their first row
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Player CSV not found: {path}")

    try:
        df = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise InvalidPlayerData(f"Cannot read player CSV {path}: {exc}") from exc
    df = df.rename(columns=CSV_COLUMN_MAP)

    if "id" not in df.columns:
        raise InvalidPlayerData(f"{path} has no ID column")

    ## Ids first, everything downstream is keyed on them.
    ids = pd.to_numeric(df["id"], errors="coerce")
    bad_ids = ids.isna() | (ids % 1 != 0)
    if bad_ids.any():
        logger.warning("Dropping %d rows without a usable id from %s", int(bad_ids.sum()), path)
    df = df.loc[~bad_ids].copy()
    df["id"] = ids.loc[~bad_ids].astype(int)

    dupes = df["id"].duplicated(keep="first")
    if dupes.any():
        logger.warning("Dropping %d rows with repeated ids from %s", int(dupes.sum()), path)
        df = df.loc[~dupes]

    for col in NUMERIC_ATTRIBUTES:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    return df.reset_index(drop=True)


def snapshot_from_frame(df: pd.DataFrame) -> PlayerSnapshot:
    schema = [col for col in NUMERIC_ATTRIBUTES if col in df.columns]

    ## NaN --> None so missing values stay missing in the records.
    clean = df.astype(object).where(pd.notna(df), None)
    records = clean.to_dict(orient="records")
    return PlayerSnapshot.from_records(records, schema=schema)


def load_snapshot(path: Union[str, Path]) -> PlayerSnapshot:
    """Load the CSV at `path` into a fresh immutable snapshot."""
    df = read_players_csv(path)
    snapshot = snapshot_from_frame(df)
    logger.info(
        "Loaded %d players (%d numeric attributes) from %s",
        len(snapshot),
        len(snapshot.schema),
        path,
    )
    return snapshot


def main():
    from fifa_analyzer.config import settings
    from fifa_analyzer.logging_config import setup_logging

    setup_logging(settings.log_level, access_log=False, app_level=settings.app_log_level)
    path = sys.argv[1] if len(sys.argv) > 1 else settings.players_csv_path

    print(f"Loading players from {path} ...")
    snapshot = load_snapshot(path)

    print(f"Players --> {len(snapshot)}")
    print(f"Numeric attributes --> {sorted(snapshot.schema)}")

    ## Showing how complete each attribute is, missing values disqualify candidates.
    print("\nMissing values per attribute:")
    for name in sorted(snapshot.schema):
        missing = sum(1 for p in snapshot if p.value(name) is None)
        if missing:
            print(f"  {name} --> {missing}")


if __name__ == "__main__":
    main()
