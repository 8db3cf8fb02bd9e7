"""Tests for directory batch processing"""
import io
from pathlib import Path

import pytest

from cachedumper.batch import SEPARATOR, dump_directory, find_tco_files, partition, run_batch
from cachedumper.config import DumpConfig
from cachedumper.enums import TCOLayout
from cachedumper.sinks import ConsoleSink, ErrorLog


class TestPartition:
    @pytest.mark.parametrize(
        "count, workers, sizes",
        [
            pytest.param(10, 4, [3, 3, 3, 1], id="uneven"),
            pytest.param(8, 4, [2, 2, 2, 2], id="even"),
            pytest.param(2, 4, [1, 1, 0, 0], id="more workers than items"),
            pytest.param(0, 3, [0, 0, 0], id="empty"),
            pytest.param(5, 1, [5], id="single worker"),
        ],
    )
    def test_chunk_sizes(self, count: int, workers: int, sizes: list) -> None:
        chunks = partition(list(range(count)), workers)
        assert [len(chunk) for chunk in chunks] == sizes

    def test_contiguous_and_complete(self) -> None:
        items = list(range(11))
        chunks = partition(items, 3)
        assert [item for chunk in chunks for item in chunk] == items
        assert chunks[0] == [0, 1, 2, 3]


class TestFindTCOFiles:
    def test_filters_by_extension(self, tmp_path: Path) -> None:
        for name in ("b.tco", "a.tco", "notes.txt", "c.tco.bak"):
            (tmp_path / name).write_bytes(b"")
        (tmp_path / "sub.tco").mkdir()

        files = find_tco_files(tmp_path, ".tco")

        assert [path.name for path in files] == ["a.tco", "b.tco"]


class TestSinks:
    def test_error_log_format(self) -> None:
        stream = io.StringIO()
        errors = ErrorLog(ConsoleSink(stream=stream))

        message = errors.record("x.tco", "boom")

        assert message == "File: 'x.tco': boom"
        assert stream.getvalue() == "File: 'x.tco': boom\n"
        assert errors.messages == [message]

    def test_alert_goes_to_error_stream(self) -> None:
        out, err = io.StringIO(), io.StringIO()
        ConsoleSink(stream=out, error_stream=err).alert("File Read Error", "gone")
        assert out.getvalue() == ""
        assert err.getvalue() == "File Read Error: gone\n"


class TestConfig:
    def test_output_path_keeps_full_name(self, tmp_path: Path) -> None:
        config = DumpConfig(input_dir=tmp_path, output_dir=tmp_path / "out", num_threads=1)
        assert config.output_path(tmp_path / "rock.tco") == tmp_path / "out" / "rock.tco.tga"

    def test_thread_count_validated(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="num_threads"):
            DumpConfig(input_dir=tmp_path, output_dir=tmp_path, num_threads=0)

    def test_string_paths_converted(self) -> None:
        config = DumpConfig(input_dir="in", output_dir="out", num_threads=2)
        assert config.input_dir == Path("in")
        assert config.output_dir == Path("out")


class TestRunBatch:
    @pytest.mark.parametrize("num_threads", [1, 3, 8])
    def test_failures_are_isolated(self, texture_dirs, build_tco, num_threads: int) -> None:
        input_dir, output_dir = texture_dirs
        for i in range(5):
            (input_dir / f"good{i}.tco").write_bytes(build_tco(TCOLayout.R8, 2, 2, bytes([i] * 4)))
        (input_dir / "empty.tco").write_bytes(b"")
        (input_dir / "flag5.tco").write_bytes(build_tco(TCOLayout.R8, 2, 2, bytes(4), flag=5))
        (input_dir / "huge.tco").write_bytes(
            build_tco(TCOLayout.R8, 2, 2, bytes(4), decompressed_size=0xFFFFFFFF)
        )

        config = DumpConfig(input_dir=input_dir, output_dir=output_dir, num_threads=num_threads)
        console = ConsoleSink(stream=io.StringIO())
        files = find_tco_files(input_dir, config.extension)

        result = run_batch(files, config, console, ErrorLog(console))

        assert len(result.files) == 8
        assert sorted(path.name for path in result.written) == [f"good{i}.tco.tga" for i in range(5)]
        assert len(result.errors) == 3
        assert "File: 'flag5.tco': File has unsupported type flag: 5" in result.errors
        assert sorted(path.name for path in output_dir.iterdir()) == [f"good{i}.tco.tga" for i in range(5)]

    def test_bad_file_does_not_stop_its_worker(self, texture_dirs, rgba_tco: bytes, build_tco) -> None:
        input_dir, output_dir = texture_dirs
        bad = input_dir / "a_bad.tco"
        bad.write_bytes(build_tco(TCOLayout.RGBA8, 2, 2, bytes(range(16)), decompressed_size=0xFFFFFFFF))
        (input_dir / "b_good.tco").write_bytes(rgba_tco)

        config = DumpConfig(input_dir=input_dir, output_dir=output_dir, num_threads=1)
        console = ConsoleSink(stream=io.StringIO())
        files = find_tco_files(input_dir, config.extension)
        assert files[0] == bad

        result = run_batch(files, config, console, ErrorLog(console))

        assert [path.name for path in result.written] == ["b_good.tco.tga"]
        assert len(result.errors) == 1
        assert result.errors[0].startswith("File: 'a_bad.tco': Failed to decompress file data")


class TestDumpDirectory:
    def test_summary(self, texture_dirs, build_tco, rgba_tco: bytes, capsys) -> None:
        input_dir, output_dir = texture_dirs
        (input_dir / "ok.tco").write_bytes(rgba_tco)
        (input_dir / "bad.tco").write_bytes(build_tco(TCOLayout.NOT_USED, 1, 1, bytes(4)))
        config = DumpConfig(input_dir=input_dir, output_dir=output_dir, num_threads=2)

        result = dump_directory(config, ConsoleSink())

        out = capsys.readouterr().out
        assert "Found 2 TCO files" in out
        assert "Using 2 threads" in out
        assert "The following ERRORS were encountered:" in out
        assert "File: 'bad.tco': TCO Layout (5) is not currently supported" in out
        assert out.rstrip().endswith("CacheDumper Finished.")
        assert SEPARATOR in out
        assert [path.name for path in result.written] == ["ok.tco.tga"]

    def test_no_errors_section_when_clean(self, texture_dirs, rgba_tco: bytes, capsys) -> None:
        input_dir, output_dir = texture_dirs
        (input_dir / "ok.tco").write_bytes(rgba_tco)
        config = DumpConfig(input_dir=input_dir, output_dir=output_dir, num_threads=1)

        dump_directory(config, ConsoleSink())

        out = capsys.readouterr().out
        assert "ERRORS" not in out
        assert "CacheDumper Finished." in out

    def test_empty_directory(self, texture_dirs, capsys) -> None:
        input_dir, output_dir = texture_dirs
        config = DumpConfig(input_dir=input_dir, output_dir=output_dir, num_threads=4)

        result = dump_directory(config, ConsoleSink())

        assert result.files == []
        assert "Found 0 TCO files" in capsys.readouterr().out
