"""
Unit tests for data export functionality.

Tests the common export helpers and the photoelectric CSV exporter.
"""

import datetime
import io
import re

import pandas as pd
import pytest

from common.utils.data_export import (
    DataExporter,
    DataExportError,
    format_fixed,
    format_iso_timestamp,
    join_quoted,
)
from photoelectric.models import (
    ExperimentLedger,
    ExperimentParameters,
    MeasurementSampler,
    PhysicsModel,
)
from photoelectric.models.errors import EmptyLedgerError
from photoelectric.utils.data_export import PhotoelectricDataExporter
from tests.mocks import FixedRandomSource, MockClock

HEADER = (
    "Timestamp,Material,Work_Function_eV,Wavelength_nm,Photon_Energy_eV,"
    "Intensity_W_per_m2,Area_cm2,Applied_Voltage_V,Mean_Current_uA,"
    "Standard_Deviation_uA,Standard_Error_uA,Measurements_Count,Individual_Readings"
)


@pytest.fixture
def exporter():
    return PhotoelectricDataExporter()


@pytest.fixture
def small_sampler(small_config):
    """Noiseless sampler taking 3 readings."""
    return MeasurementSampler(FixedRandomSource(0.5), small_config)


@pytest.fixture
def filled_ledger(small_sampler, cesium_params):
    """Ledger with three noiseless Cesium measurements at 0, -0.5, +0.5 V."""
    ledger = ExperimentLedger(clock=MockClock())
    model = PhysicsModel()
    for voltage in [0.0, -0.5, 0.5]:
        point = cesium_params.with_voltage(voltage)
        physics = model.evaluate(point)
        ledger.record_measurement(point, physics, small_sampler.sample(physics.current_ua))
    return ledger


class TestCommonHelpers:
    """Tests for the shared formatting helpers."""

    def test_format_fixed(self):
        assert format_fixed(0.0005) == "0.000500"
        assert format_fixed(3.0999319999) == "3.099932"
        assert format_fixed(-0.5, precision=2) == "-0.50"
        assert format_fixed(5) == "5.000000"

    def test_iso_timestamp_utc(self):
        stamp = datetime.datetime(2026, 1, 2, 3, 4, 5, 678000, tzinfo=datetime.timezone.utc)
        assert format_iso_timestamp(stamp) == "2026-01-02T03:04:05.678Z"

    def test_iso_timestamp_converts_offsets(self):
        tz = datetime.timezone(datetime.timedelta(hours=-7))
        stamp = datetime.datetime(2026, 1, 1, 20, 0, 0, tzinfo=tz)
        assert format_iso_timestamp(stamp) == "2026-01-02T03:00:00.000Z"

    def test_iso_timestamp_naive_taken_as_utc(self):
        stamp = datetime.datetime(2026, 1, 2, 3, 4, 5)
        assert format_iso_timestamp(stamp) == "2026-01-02T03:04:05.000Z"

    def test_join_quoted(self):
        assert join_quoted([0.0005, 0.00050001]) == '"0.000500;0.000500"'
        assert join_quoted([1.0], quote=None) == "1.000000"

    def test_generate_timestamp_is_epoch_ms(self):
        timestamp = DataExporter.generate_timestamp()
        assert timestamp.isdigit()
        assert len(timestamp) == 13

    def test_ensure_directory_creates_path(self, tmp_path):
        file_path = tmp_path / "nested" / "path" / "test.csv"
        result = DataExporter.ensure_directory(file_path)
        assert (tmp_path / "nested" / "path").is_dir()
        assert result == file_path


class TestExportCsv:
    """Tests for PhotoelectricDataExporter.export_csv()"""

    def test_empty_ledger_raises(self, exporter):
        with pytest.raises(EmptyLedgerError):
            exporter.export_csv(ExperimentLedger())

    def test_empty_ledger_error_is_export_error(self, exporter):
        with pytest.raises(DataExportError):
            exporter.export_csv(ExperimentLedger())

    def test_header_exact(self, exporter, filled_ledger):
        lines = exporter.export_csv(filled_ledger).splitlines()
        assert lines[0] == HEADER

    def test_one_row_per_record(self, exporter, filled_ledger):
        text = exporter.export_csv(filled_ledger)
        assert text.endswith("\n")
        assert len(text.splitlines()) == 1 + len(filled_ledger)

    def test_row_formatting(self, exporter, filled_ledger):
        row = exporter.export_csv(filled_ledger).splitlines()[1]

        assert row.split(",") == [
            "2026-01-02T03:04:05.678Z",
            "Cesium",
            "2.100000",
            "400.000000",
            "3.099932",
            "5.000000",
            "0.100000",
            "0.000000",
            "0.000500",
            "0.000000",
            "0.000000",
            "3",
            '"0.000500;0.000500;0.000500"',
        ]

    def test_rows_keep_insertion_order(self, exporter, filled_ledger):
        rows = exporter.export_csv(filled_ledger).splitlines()[1:]
        voltages = [row.split(",")[7] for row in rows]
        assert voltages == ["0.000000", "-0.500000", "0.500000"]

    def test_each_row_uses_its_own_material(self, exporter, small_sampler, cesium_params):
        ledger = ExperimentLedger(clock=MockClock())
        model = PhysicsModel()
        for material_id in ["Cs", "Na"]:
            point = cesium_params.with_changes(material_id=material_id)
            physics = model.evaluate(point)
            ledger.record_measurement(point, physics, small_sampler.sample(physics.current_ua))

        rows = exporter.export_csv(ledger).splitlines()[1:]
        assert [row.split(",")[1:3] for row in rows] == [
            ["Cesium", "2.100000"],
            ["Sodium", "2.280000"],
        ]

    def test_render_matches_export(self, exporter, filled_ledger):
        assert exporter.render(filled_ledger) == exporter.export_csv(filled_ledger)


class TestRoundTrip:
    """Exported CSVs parse back to the recorded values."""

    def test_voltage_and_mean_current_recovered(self, exporter, seeded_experiment, cesium_params):
        seeded_experiment.sweep(cesium_params, [0.0, -0.8, -0.3, 0.4, -1.2])
        ledger = seeded_experiment.ledger

        df = exporter.load_csv(io.StringIO(exporter.export_csv(ledger)))

        assert len(df) == len(ledger)
        for (_, row), record in zip(df.iterrows(), ledger.records):
            assert abs(row["Applied_Voltage_V"] - record.voltage) < 1e-6
            assert abs(row["Mean_Current_uA"] - record.mean_current_ua) < 1e-6

    def test_readings_recovered(self, exporter, filled_ledger):
        df = exporter.load_csv(io.StringIO(exporter.export_csv(filled_ledger)))
        assert df["Individual_Readings"].iloc[0] == [0.0005, 0.0005, 0.0005]
        assert df["Measurements_Count"].iloc[0] == 3

    def test_timestamps_parse(self, exporter, filled_ledger):
        df = exporter.load_csv(io.StringIO(exporter.export_csv(filled_ledger)))
        stamps = pd.to_datetime(df["Timestamp"], utc=True)
        assert stamps.iloc[0] == pd.Timestamp("2026-01-02T03:04:05.678Z")


class TestSaveCsv:
    """Tests for writing the export to disk."""

    def test_save_to_path(self, exporter, filled_ledger, tmp_path):
        file_path = tmp_path / "out" / "data.csv"

        written = exporter.save_csv(filled_ledger, file_path)

        assert written == file_path
        assert file_path.read_text(encoding="utf-8") == exporter.export_csv(filled_ledger)

    def test_save_default_filename(self, exporter, filled_ledger, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        written = exporter.save_csv(filled_ledger)
        assert re.match(r"^photoelectric_data_\d{13}\.csv$", written.name)
        assert written.exists()

    def test_empty_ledger_writes_nothing(self, exporter, tmp_path):
        file_path = tmp_path / "empty.csv"
        with pytest.raises(EmptyLedgerError):
            exporter.save_csv(ExperimentLedger(), file_path)
        assert not file_path.exists()

    def test_unwritable_path_raises(self, exporter, filled_ledger, tmp_path):
        with pytest.raises(DataExportError, match="Failed to save file"):
            exporter.save_csv(filled_ledger, tmp_path)

    def test_generate_filename(self, exporter):
        assert re.match(r"^photoelectric_data_\d{13}\.csv$", exporter.generate_filename())


class TestLedgerToDataFrame:
    """Tests for PhotoelectricDataExporter.ledger_to_dataframe()"""

    def test_columns_and_rows(self, exporter, filled_ledger):
        df = exporter.ledger_to_dataframe(filled_ledger)
        assert list(df.columns) == HEADER.split(",")[:-1]
        assert list(df["Applied_Voltage_V"]) == [0.0, -0.5, 0.5]
        assert list(df["Material"]) == ["Cesium"] * 3

    def test_empty_ledger(self, exporter):
        df = exporter.ledger_to_dataframe(ExperimentLedger())
        assert df.empty
        assert len(df.columns) == 12

    def test_dtypes(self, exporter, filled_ledger):
        df = exporter.ledger_to_dataframe(filled_ledger)
        assert df["Wavelength_nm"].dtype == float
        assert df["Measurements_Count"].dtype.kind == "i"


class TestExportFrame:
    """Tests for PhotoelectricDataExporter.export_frame()"""

    def test_string_columns(self, exporter, filled_ledger):
        df = exporter.export_frame(filled_ledger)
        assert df["Timestamp"].iloc[0] == "2026-01-02T03:04:05.678Z"
        assert df["Individual_Readings"].iloc[0] == '"0.000500;0.000500;0.000500"'
        assert list(df.columns) == HEADER.split(",")

    def test_integer_settings_written_with_fixed_decimals(self, exporter, small_sampler):
        ledger = ExperimentLedger(clock=MockClock())
        params = ExperimentParameters("Cs", 400, 5, 0.1, 0)
        physics = PhysicsModel().evaluate(params)
        ledger.record_measurement(params, physics, small_sampler.sample(physics.current_ua))

        fields = exporter.export_csv(ledger).splitlines()[1].split(",")

        assert fields[3] == "400.000000"
        assert fields[5] == "5.000000"
        assert fields[7] == "0.000000"
        assert fields[11] == "3"
