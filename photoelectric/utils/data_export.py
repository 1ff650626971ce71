"""
Photoelectric Data Export Utility

Serializes the experiment ledger to CSV text, one row per measurement
event, and reads such files back for analysis.
"""

import csv
import io
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from common.utils.data_export import (
    DataExporter,
    DataExportError,
    format_iso_timestamp,
    join_quoted,
)
from ..config.settings import DATA_EXPORT_CONFIG, ERROR_MESSAGES
from ..models.errors import EmptyLedgerError
from ..models.ledger import ExperimentLedger
from ..models.materials import get_material


class PhotoelectricDataExporter(DataExporter):
    """
    Exports an ExperimentLedger as CSV.

    Row layout (fixed order): timestamp, material, work function,
    wavelength, photon energy, intensity, area, applied voltage, mean
    current, standard deviation, standard error, reading count, and all
    individual readings packed into one quoted field.
    """

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize the data exporter.

        Args:
            config: Optional configuration override
        """
        self.config = config or DATA_EXPORT_CONFIG.copy()

    @property
    def headers(self):
        return list(self.config["headers"])

    def generate_filename(self) -> str:
        """Filename of the form photoelectric_data_<epoch-ms>.csv."""
        template = self.config.get(
            "file_template", "photoelectric_data_{timestamp}.csv"
        )
        return template.format(timestamp=self.generate_timestamp())

    def export_frame(self, ledger: ExperimentLedger) -> pd.DataFrame:
        """
        The ledger as it is written to CSV.

        Same columns as ledger_to_dataframe() with the timestamp as an
        ISO-8601 UTC string and the readings packed into one quoted field.
        """
        headers = self.headers
        records = ledger.records
        df = self.ledger_to_dataframe(ledger)
        df[headers[0]] = [format_iso_timestamp(r.timestamp) for r in records]
        df[headers[-1]] = [
            join_quoted(
                r.raw_samples,
                delimiter=self.config.get("readings_delimiter", ";"),
                precision=self.config.get("precision", 6),
            )
            for r in records
        ]
        return df

    def export_csv(self, ledger: ExperimentLedger) -> str:
        """
        Render the ledger as CSV text.

        Args:
            ledger: Ledger to export

        Returns:
            str: Header line followed by one line per record

        Raises:
            EmptyLedgerError: If the ledger holds no records
        """
        if ledger.is_empty():
            raise EmptyLedgerError(ERROR_MESSAGES["empty_ledger"])

        # Readings carry their own double quotes; "'" never occurs in a field
        return self.export_frame(ledger).to_csv(
            index=False,
            sep=self.config.get("csv_delimiter", ","),
            float_format=f"%.{self.config.get('precision', 6)}f",
            quoting=csv.QUOTE_NONE,
            quotechar="'",
            lineterminator="\n",
        )

    def render(self, source: ExperimentLedger) -> str:
        return self.export_csv(source)

    def save_csv(
        self,
        ledger: ExperimentLedger,
        file_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Write the ledger export to disk.

        Args:
            ledger: Ledger to export
            file_path: Destination (generate_filename() in the current
                directory by default)

        Returns:
            Path: The written file

        Raises:
            EmptyLedgerError: If the ledger holds no records (no file is created)
            DataExportError: If the file cannot be written
        """
        if file_path is None:
            file_path = self.generate_filename()
        try:
            return self.save(ledger, file_path)
        except EmptyLedgerError:
            raise
        except DataExportError as e:
            raise DataExportError(f"{ERROR_MESSAGES['file_save_failed']} ({e})") from e

    def load_csv(self, source: Union[str, Path, io.StringIO]) -> pd.DataFrame:
        """
        Read an exported CSV back into a DataFrame.

        The readings column is parsed into lists of floats.

        Args:
            source: File path or text buffer

        Returns:
            pd.DataFrame: One row per measurement, exported column names
        """
        readings_header = self.headers[-1]
        readings_delimiter = self.config.get("readings_delimiter", ";")

        df = pd.read_csv(
            source,
            sep=self.config.get("csv_delimiter", ","),
            dtype={readings_header: str},
        )
        df[readings_header] = df[readings_header].map(
            lambda field: [float(v) for v in field.split(readings_delimiter) if v]
        )
        return df

    def ledger_to_dataframe(self, ledger: ExperimentLedger) -> pd.DataFrame:
        """
        Tabular view of the ledger without the raw readings.

        Args:
            ledger: Ledger to convert (may be empty)

        Returns:
            pd.DataFrame: Columns match the export headers minus readings,
                rows in insertion order
        """
        headers = self.headers[:-1]
        rows = []
        for record in ledger.records:
            params = record.parameters
            rows.append([
                record.timestamp,
                get_material(params.material_id).name,
                record.physics.work_function_ev,
                params.wavelength_nm,
                record.physics.photon_energy_ev,
                params.intensity_w_per_m2,
                params.area_cm2,
                params.applied_voltage_v,
                record.mean_current_ua,
                record.std_dev_ua,
                record.std_error_ua,
                record.sample_count,
            ])
        df = pd.DataFrame(rows, columns=headers)
        # Float measurements, integer reading count (also for an empty ledger)
        df[headers[2:-1]] = df[headers[2:-1]].astype(float)
        df[headers[-1]] = df[headers[-1]].astype(int)
        return df
