"""Tests for the extraction pipeline and its stages."""

import os
from pathlib import Path

import pytest

from map_extractor.config import select_stages
from map_extractor.datatypes import RunConfig
from map_extractor.errors import ToolFailedError
from map_extractor.pipeline import PipelineContext, prepare_output_tree, run_pipeline
from map_extractor.pipeline.stages import mmaps
from map_extractor.pipeline.tools import run_tool, working_directory


def _config(client_dir, output_dir, maps=False, vmaps=False, mmaps=False, verbose=False):
    return RunConfig(
        input_dir=client_dir,
        output_dir=output_dir,
        stages=select_stages(maps, vmaps, mmaps),
        verbose=verbose,
        shell=False,
    )


class TestRunPipeline:
    """Test stage ordering, selection and classification."""

    def test_default_runs_all_in_order(self, client_dir, output_dir, fake_tools):
        """Test maps, vmaps and mmaps tools run in that order."""
        results = run_pipeline(_config(client_dir, output_dir))

        assert fake_tools.tools == [
            "mapextractor", "vmap4extractor", "vmap4assembler", "mmaps_generator",
        ]
        assert [r.stage for r in results] == ["maps", "vmaps", "mmaps"]

    def test_tool_arguments(self, client_dir, output_dir, fake_tools):
        """Test the fixed argument shape of every tool."""
        run_pipeline(_config(client_dir, output_dir))

        assert fake_tools.calls == [
            ["mapextractor", "-i", str(client_dir), "-o", str(output_dir), "-e", "7", "-f", "0"],
            ["vmap4extractor", "-l", "-d", str(client_dir / "Data")],
            ["vmap4assembler", str(output_dir / "Buildings"), str(output_dir / "vmaps")],
            ["mmaps_generator"],
        ]

    def test_only_selected_stage_runs(self, client_dir, output_dir, fake_tools):
        """Test --maps alone runs only the map extractor."""
        results = run_pipeline(_config(client_dir, output_dir, maps=True))
        assert fake_tools.tools == ["mapextractor"]
        assert len(results) == 1

    def test_mmaps_independent_of_vmaps_flag(self, client_dir, output_dir, fake_tools):
        """Test mmaps runs on its own flag."""
        run_pipeline(_config(client_dir, output_dir, mmaps=True))
        assert fake_tools.tools == ["mmaps_generator"]

    def test_tools_run_in_output_dir(self, client_dir, output_dir, fake_tools):
        """Test each tool runs with the output directory as cwd, restored afterwards."""
        before = os.getcwd()
        run_pipeline(_config(client_dir, output_dir))

        assert {Path(cwd).resolve() for cwd in fake_tools.cwds} == {output_dir.resolve()}
        assert os.getcwd() == before

    def test_output_tree_prepared(self, client_dir, output_dir, fake_tools):
        """Test vmaps and mmaps exist even when only maps runs."""
        run_pipeline(_config(client_dir, output_dir, maps=True))
        assert (output_dir / "vmaps").is_dir()
        assert (output_dir / "mmaps").is_dir()

    def test_maps_succeeded(self, client_dir, output_dir, fake_tools, capsys):
        """Test enough maps and dbc files classify the stage as succeeded."""
        fake_tools.produces["mapextractor"] = {"maps": 5700, "dbc": 240}
        results = run_pipeline(_config(client_dir, output_dir, maps=True))

        assert results[0].succeeded
        assert "Map extraction succeeded." in capsys.readouterr().out

    def test_uncertain_stage_does_not_stop_pipeline(self, client_dir, output_dir, fake_tools, capsys):
        """Test a vmaps shortfall is advisory and mmaps still runs."""
        fake_tools.produces["vmap4assembler"] = {"vmaps": 200}
        results = run_pipeline(_config(client_dir, output_dir))

        vmaps_result = results[1]
        assert vmaps_result.outcome == "uncertain"
        assert vmaps_result.observed_counts == {"vmaps": 200}
        assert fake_tools.tools[-1] == "mmaps_generator"
        assert "Visual map (vmap) extraction may have failed." in capsys.readouterr().out

    def test_verbose_lists_counts(self, client_dir, output_dir, fake_tools, capsys):
        fake_tools.produces["mmaps_generator"] = {"mmaps": 12}
        run_pipeline(_config(client_dir, output_dir, mmaps=True, verbose=True))
        assert "mmaps: 12 files (expected >= 3600)" in capsys.readouterr().out

    def test_failing_tool_stops_pipeline(self, client_dir, output_dir, fake_tools):
        """Test a non-zero exit aborts the run and restores the cwd."""
        before = os.getcwd()
        fake_tools.returncodes["vmap4extractor"] = 3

        with pytest.raises(ToolFailedError) as excinfo:
            run_pipeline(_config(client_dir, output_dir))

        assert excinfo.value.returncode == 3
        assert fake_tools.tools == ["mapextractor", "vmap4extractor"]
        assert os.getcwd() == before

    def test_relative_paths_anchored(self, client_dir, output_dir, fake_tools, monkeypatch):
        """Test relative directories resolve against the starting directory."""
        monkeypatch.chdir(output_dir.parent)
        fake_tools.produces["mmaps_generator"] = {"mmaps": 3600}
        config = _config(Path(client_dir.name), Path(output_dir.name), mmaps=True)

        results = run_pipeline(config)

        assert results[0].succeeded
        assert not (output_dir / output_dir.name).exists()


class TestMmapsStage:
    """Test the movement map stage advisory."""

    def test_advisory_without_vmaps(self, client_dir, output_dir, fake_tools, capsys):
        """Test a missing vmaps directory is reported but the generator still runs."""
        mmaps.run_stage(PipelineContext(input_dir=client_dir, output_dir=output_dir))
        assert "requires that visual map (vmap)" in capsys.readouterr().out
        assert fake_tools.tools == ["mmaps_generator"]

    def test_no_advisory_with_vmaps(self, client_dir, output_dir, fake_tools, capsys):
        prepare_output_tree(output_dir)
        mmaps.run_stage(PipelineContext(input_dir=client_dir, output_dir=output_dir))
        assert "requires" not in capsys.readouterr().out


class TestTools:
    """Test tool invocation helpers."""

    def test_missing_executable(self, tmp_path):
        """Test a tool that cannot be found fails like a shell would."""
        with pytest.raises(ToolFailedError) as excinfo:
            run_tool([str(tmp_path / "no-such-tool"), "-x"])
        assert excinfo.value.returncode == 127
        assert excinfo.value.command[1] == "-x"

    def test_working_directory_restored_on_error(self, tmp_path):
        before = os.getcwd()
        with pytest.raises(RuntimeError):
            with working_directory(tmp_path):
                assert Path.cwd().resolve() == tmp_path.resolve()
                raise RuntimeError("boom")
        assert os.getcwd() == before
