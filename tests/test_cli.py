import io

from huffcode.cli import main


def _write_sample(tmp_path):
    source = tmp_path / "input.txt"
    source.write_bytes(b"aaaabbbccd\n" * 40)
    return source


def test_compress_then_decompress(tmp_path, capsys):
    source = _write_sample(tmp_path)
    packed = tmp_path / "output.txt"
    restored = tmp_path / "output2.txt"

    assert main(["compress", "-i", str(source), "-o", str(packed)]) == 0
    out = capsys.readouterr().out
    assert f"Input File Size : {source.stat().st_size} bytes." in out
    assert f"Compressed File Size : {packed.stat().st_size} bytes." in out
    assert "Compression Ratio : " in out

    assert main(["decompress", "-i", str(packed), "-o", str(restored)]) == 0
    out = capsys.readouterr().out
    assert f"DeCompressed File Size : {restored.stat().st_size} bytes." in out
    assert restored.read_bytes() == source.read_bytes()


def test_mode_read_from_stdin(tmp_path, monkeypatch, capsys):
    source = _write_sample(tmp_path)
    packed = tmp_path / "packed.bin"
    monkeypatch.setattr("sys.stdin", io.StringIO("compress\n"))
    assert main(["-i", str(source), "-o", str(packed)]) == 0
    assert packed.stat().st_size < source.stat().st_size
    assert "Time taken: " in capsys.readouterr().out


def test_unknown_mode_does_nothing(tmp_path, capsys):
    source = _write_sample(tmp_path)
    target = tmp_path / "never.txt"
    assert main(["shrink", "-i", str(source), "-o", str(target)]) == 0
    assert not target.exists()
    assert capsys.readouterr().out == ""


def test_missing_input_fails(tmp_path, capsys):
    status = main(["compress", "-i", str(tmp_path / "absent.txt"), "-o", str(tmp_path / "o")])
    assert status == 1
    assert "huffcode:" in capsys.readouterr().err


def test_corrupt_compressed_input_fails(tmp_path):
    broken = tmp_path / "broken.bin"
    broken.write_bytes(b"no terminator here")
    assert main(["decompress", "-i", str(broken), "-o", str(tmp_path / "out")]) == 1