import logging

import pytest

from wavecodec import file_access
from wavecodec.errors import MalformedHeaderError
from wavecodec.samples import encode_mono


def test_write_then_read_bytes(tmp_path):
    path = tmp_path / "raw.wav"
    data = encode_mono([0.5, -0.5], 44100, 16)

    file_access.write_file_bytes(data, path)

    assert path.read_bytes() == data
    assert file_access.read_file_bytes(str(path)) == data


def test_write_replaces_existing_file(tmp_path):
    path = tmp_path / "out.wav"
    path.write_bytes(b"x" * 100)

    file_access.write_file_bytes(b"RIFF", path)
    assert path.read_bytes() == b"RIFF"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_access.read_file_bytes(tmp_path / "missing.wav")
    with pytest.raises(FileNotFoundError):
        file_access.read_mono(tmp_path / "missing.wav")


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        file_access.write_file_bytes(b"RIFF", tmp_path / "nope" / "out.wav")


def test_mono_file_round_trip(tmp_path):
    path = tmp_path / "mono.wav"
    file_access.write_mono([0.0, 0.5, -0.5], path, sample_rate=22050, bits_per_sample=8)

    header = file_access.read_header(path)
    assert header.num_channels == 1
    assert header.sample_rate == 22050
    assert header.bits_per_sample == 8

    assert file_access.read_mono(path).tolist() == [0.0, 0.5, -0.5]


def test_stereo_file_round_trip(tmp_path):
    path = tmp_path / "stereo.wav"
    file_access.write_stereo([0.5, 0.25], [-0.5, 0.0], path)

    header = file_access.read_header(path)
    assert header.num_channels == 2
    assert header.sample_rate == 44100
    assert header.bits_per_sample == 16
    assert path.stat().st_size == 44 + header.subchunk2_size

    left, right = file_access.read_stereo(path)
    assert left.tolist() == [0.5, 0.25]
    assert right.tolist() == [-0.5, 0.0]


def test_read_header_of_non_wav_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"not a wave file" * 4)

    with pytest.raises(MalformedHeaderError):
        file_access.read_header(path)


def test_file_operations_are_logged(tmp_path, caplog):
    path = tmp_path / "logged.wav"

    with caplog.at_level(logging.INFO, logger="wavecodec.file_access"):
        file_access.write_mono([0.0], path)
        file_access.read_mono(path)

    assert f"Wrote 46 bytes to {path}" in caplog.text
    assert f"Read 46 bytes from {path}" in caplog.text
