"""Data loading and preparation utilities."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from econstats.analysis.sanitize import to_finite_float
from econstats.config import DATA_PATH

logger = logging.getLogger(__name__)


class DataLoader:
    """Load indicator series and shape them for analysis.

    Frames are "wide": indexed by period in time order, one column per entity.
    """

    @staticmethod
    def load_csv(filename: str, period_column: str = "period") -> pd.DataFrame:
        """Load a wide CSV file from the data directory, indexed by period."""
        filepath = Path(DATA_PATH) / filename
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        frame = pd.read_csv(filepath, dtype={period_column: str})
        return frame.set_index(period_column)

    @staticmethod
    def frame_from_payload(
        payload: Mapping[str, Any],
        indicator: str,
        entities: Sequence[str],
        periods: Sequence[str],
    ) -> pd.DataFrame:
        """Reshape a provider payload into a wide frame.

        ``payload`` is shaped ``{"values": {indicator: {entity: {period:
        value}}}}``. Periods keep the requested order and those without a value
        for any entity are dropped. Entities absent from the payload still get
        an (empty) column so every requested entity is reported. Branches of
        the payload that are not mappings are treated as absent.
        """
        values = payload.get("values") if isinstance(payload, Mapping) else None
        by_indicator = values if isinstance(values, Mapping) else {}
        series_by_entity = by_indicator.get(indicator)
        if not isinstance(series_by_entity, Mapping):
            series_by_entity = {}
        periods = list(dict.fromkeys(str(period) for period in periods))

        columns = {}
        for entity in entities:
            observations = series_by_entity.get(entity)
            if not isinstance(observations, Mapping):
                if observations is not None:
                    logger.warning("Ignoring malformed %s series for %s", indicator, entity)
                observations = {}
            observations = {str(key): value for key, value in observations.items()}
            column = pd.Series(
                [observations.get(period) for period in periods],
                index=periods,
                dtype=object,
            )
            # same coercion as the statistics sanitizer: booleans and
            # non-decimal text become missing values
            columns[entity] = column.map(to_finite_float).astype(float)

        frame = pd.DataFrame(columns, index=pd.Index(periods, name="period"))
        missing = [entity for entity in entities if entity not in series_by_entity]
        if missing:
            logger.info("No %s data for entities: %s", indicator, ", ".join(missing))
        return frame.dropna(how="all")

    @staticmethod
    def samples_from_frame(frame: pd.DataFrame) -> Dict[str, List[float]]:
        """Per-entity values in period order; missing cells stay NaN."""
        return {str(column): frame[column].tolist() for column in frame.columns}
