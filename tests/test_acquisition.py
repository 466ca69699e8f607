import numpy as np
import pytest

from neurofocus.acquisition.recordings import load_stage_recordings
from neurofocus.acquisition.sources import FakeSampleSource
from neurofocus.core.config import DEFAULT_STAGE


def test_fake_source_window_length():
    source = FakeSampleSource(fs=512, seed=1)
    window = source.generate_window(2.0)
    assert window.shape == (1024,)
    assert source.time == pytest.approx(2.0)


def test_fake_source_is_reproducible_with_seed():
    a = FakeSampleSource(seed=7).generate_window(2.0)
    b = FakeSampleSource(seed=7).generate_window(2.0)
    assert np.array_equal(a, b)


def test_fake_source_carries_beta_rhythm():
    source = FakeSampleSource(fs=512, noise_std=0.0, seed=3)
    window = source.generate_window(2.0)
    spectrum = np.abs(np.fft.rfft(window))
    freqs = np.fft.rfftfreq(len(window), 1 / 512)
    assert freqs[np.argmax(spectrum)] == pytest.approx(20.0)


def test_load_staged_recording(tmp_path):
    path = tmp_path / "session.csv"
    path.write_text(
        "value,stage\n"
        "1.0,1_Baseline_Relaxed\n"
        "2.0,1_Baseline_Relaxed\n"
        "x,1_Baseline_Relaxed\n"
        "3.0,3_Focused_Task\n"
        "4.0,3_Focused_Task\n"
        "5.0,3_Focused_Task\n"
    )
    recordings = load_stage_recordings(str(path))

    assert [r.stage_name for r in recordings] == ["1_Baseline_Relaxed", "3_Focused_Task"]
    assert [r.stage_order for r in recordings] == [1, 2]
    np.testing.assert_array_equal(recordings[0].samples, [1.0, 2.0])
    np.testing.assert_array_equal(recordings[1].samples, [3.0, 4.0, 5.0])


def test_load_unlabelled_recording(tmp_path):
    path = tmp_path / "raw.csv"
    path.write_text("timestamp_ms,reading\n0,10\n2,11\n4,12\n")
    recordings = load_stage_recordings(str(path), value_col="reading")

    assert len(recordings) == 1
    assert recordings[0].stage_name == DEFAULT_STAGE
    np.testing.assert_array_equal(recordings[0].samples, [10.0, 11.0, 12.0])


def test_falls_back_to_first_numeric_column(tmp_path):
    path = tmp_path / "raw.csv"
    path.write_text("label,amplitude\na,0.5\nb,0.25\n")
    recordings = load_stage_recordings(str(path))
    np.testing.assert_array_equal(recordings[0].samples, [0.5, 0.25])


def test_missing_file_raises():
    with pytest.raises(FileNotFoundError):
        load_stage_recordings("does/not/exist.csv")


def test_no_sample_column_raises(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("name\nfoo\nbar\n")
    with pytest.raises(ValueError):
        load_stage_recordings(str(path))


def test_revisited_stage_is_a_separate_recording(tmp_path):
    path = tmp_path / "session.csv"
    rows = ["value,stage"]
    rows += ["1.0,focus"] * 3 + ["2.0,non-focus"] * 3 + ["3.0,focus"] * 3
    path.write_text("\n".join(rows) + "\n")

    recordings = load_stage_recordings(str(path))

    assert [(r.stage_name, r.stage_order) for r in recordings] == [
        ("focus", 1), ("non-focus", 2), ("focus", 3)
    ]
    np.testing.assert_array_equal(recordings[0].samples, [1.0, 1.0, 1.0])
    np.testing.assert_array_equal(recordings[2].samples, [3.0, 3.0, 3.0])


def test_skipped_rows_do_not_split_a_stage(tmp_path):
    path = tmp_path / "session.csv"
    path.write_text("value,stage\n1.0,focus\nx,focus\n2.0,focus\n")
    recordings = load_stage_recordings(str(path))

    assert len(recordings) == 1
    np.testing.assert_array_equal(recordings[0].samples, [1.0, 2.0])
