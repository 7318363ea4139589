"""Check many barcodes against the watchlist in one go."""

import logging
import pathlib
from typing import Iterable, List, Union

import pandas as pd
from tqdm.auto import tqdm

from ingredient_inspector.scanning import ScanSession

logger = logging.getLogger(__name__)

COLUMNS = [
    "barcode",
    "product_name",
    "nova_score",
    "matches",
    "match_count",
    "error",
]


def read_barcodes(path: Union[str, pathlib.Path]) -> List[str]:
    """Read one barcode per line, skipping blank lines and ``#`` comments."""
    barcodes = []
    for line in pathlib.Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            barcodes.append(line)
    return barcodes


def check_barcodes(
    session: ScanSession, barcodes: Iterable[str], progress: bool = True
) -> pd.DataFrame:
    """Scan each barcode in turn and tabulate the outcomes.

    Scans run one after another through ``session``; a failed lookup is
    recorded in the ``error`` column and does not stop the batch.

    Args:
        session: Scan session holding the client and watchlist
        barcodes: Barcodes to check
        progress: Show a tqdm progress bar

    Returns:
        DataFrame with one row per barcode and columns ``COLUMNS``.
        ``matches`` holds the matched entries joined with ", ".
    """
    barcodes = list(barcodes)
    rows = []
    for barcode in tqdm(barcodes, desc="Checking barcodes", disable=not progress):
        outcome = session.scan(barcode)
        if outcome.ok:
            rows.append(
                {
                    "barcode": barcode,
                    "product_name": outcome.product.product_name,
                    "nova_score": outcome.product.nova_score.value,
                    "matches": ", ".join(outcome.matches),
                    "match_count": len(outcome.matches),
                    "error": "",
                }
            )
        else:
            rows.append(
                {
                    "barcode": barcode,
                    "product_name": "",
                    "nova_score": "",
                    "matches": "",
                    "match_count": 0,
                    "error": outcome.message,
                }
            )

    df = pd.DataFrame(rows, columns=COLUMNS)
    failed = (df["error"] != "").sum()
    logger.info(f"Checked {len(df)} barcodes, {failed} failed")
    return df
