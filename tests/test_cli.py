"""End-to-end tests for the command line scripts"""

import importlib
import json
import os

import matplotlib
import networkx as nx
import pytest

import check_mst
import create_graph_files
import run_prim
from mtx_loader import save_metadata, write_mtx


class TestRunPrim:
    def test_report(self, small_graph, tmp_path, capsys):
        path = str(tmp_path / "small.mtx")
        write_mtx(small_graph, path)

        assert run_prim.main([path, "--use-weights", "--show", "2"]) == 0
        out = capsys.readouterr().out

        assert "Graph loaded: 5 nodes, 7 edges" in out
        assert "Minimum total MST cost: 27.00" in out
        assert "Connections in MST: 4" in out
        assert "Cost of installing every edge: 60.00" in out
        assert "Savings using the MST: 33.00 (55.00%)" in out
        assert "✓ Valid MST" in out
        assert "  1. Site    1 <-> Site    4 (Cost: 5.00)" in out
        assert "... and 2 more connections" in out
        assert "O(E log V)" in out

    def test_disconnected_graph_fails_verification(self, disconnected_graph, tmp_path, capsys):
        path = str(tmp_path / "split.json")
        save_metadata(disconnected_graph, path)

        assert run_prim.main([path]) == 2
        out = capsys.readouterr().out
        assert "Connections in MST: 1" in out
        assert "vertex 2 is isolated" in out

    def test_compare_and_output(self, random_graph, tmp_path, capsys):
        path = str(tmp_path / "random.json")
        output = str(tmp_path / "results.json")
        save_metadata(random_graph, path)

        assert run_prim.main([path, "--compare", "--output", output]) == 0
        assert "✓ matches Prim" in capsys.readouterr().out

        with open(output) as f:
            results = json.load(f)
        assert results["valid"] is True
        assert results["diagnosis"] is None
        assert len(results["mst_edges"]) == random_graph.vertices - 1
        assert results["mst_weight"] == results["networkx_weight"]

    def test_missing_file(self, tmp_path, capsys):
        assert run_prim.main([str(tmp_path / "nope.mtx")]) == 1
        assert "Error reading the file" in capsys.readouterr().out

    def test_plot(self, small_graph, tmp_path):
        path = str(tmp_path / "small.json")
        plot = str(tmp_path / "mst.png")
        save_metadata(small_graph, path)

        assert run_prim.main([path, "--plot", plot]) == 0
        assert os.path.getsize(plot) > 0

    def test_output_into_missing_directory(self, small_graph, tmp_path, capsys):
        path = str(tmp_path / "small.json")
        output = str(tmp_path / "missing" / "r.json")
        save_metadata(small_graph, path)

        assert run_prim.main([path, "--output", output]) == 1
        assert f"Error writing {output}" in capsys.readouterr().out
        assert not os.path.exists(output)

    def test_plot_into_missing_directory(self, small_graph, tmp_path, capsys):
        path = str(tmp_path / "small.json")
        plot = str(tmp_path / "missing" / "mst.png")
        save_metadata(small_graph, path)

        assert run_prim.main([path, "--plot", plot]) == 1
        assert f"Error writing {plot}" in capsys.readouterr().out

    def test_negative_show_is_rejected(self, small_graph, tmp_path, capsys):
        path = str(tmp_path / "small.json")
        save_metadata(small_graph, path)

        with pytest.raises(SystemExit) as excinfo:
            run_prim.main([path, "--show", "-1"])
        assert excinfo.value.code == 2
        assert "--show must be non-negative" in capsys.readouterr().err

    def test_show_zero_lists_nothing(self, small_graph, tmp_path, capsys):
        path = str(tmp_path / "small.json")
        save_metadata(small_graph, path)

        assert run_prim.main([path, "--show", "0"]) == 0
        out = capsys.readouterr().out
        assert "Site" not in out
        assert "... and 4 more connections" in out


class TestCheckMst:
    def test_import_keeps_matplotlib_backend(self, monkeypatch):
        calls = []
        monkeypatch.setattr(matplotlib, "use", lambda *a, **kw: calls.append(a))
        importlib.reload(check_mst)
        importlib.reload(create_graph_files)
        assert calls == []

    def test_compare_with_networkx(self, small_graph):
        from prim_mst import build_mst

        comparison = check_mst.compare_with_networkx(small_graph, build_mst(small_graph))
        assert comparison["mst_weight"] == 27.0
        assert comparison["networkx_weight"] == 27.0
        assert comparison["matches"]

    def test_compare_detects_wrong_cost(self, small_graph):
        from prim_mst import MSTResult

        comparison = check_mst.compare_with_networkx(small_graph, MSTResult([], 23.0))
        assert comparison["difference"] == 4.0
        assert not comparison["matches"]

    def test_networkx_weight_uses_start_component(self, disconnected_graph):
        assert check_mst.networkx_mst_weight(disconnected_graph) == 5.0

    def test_main(self, property_graph, tmp_path, capsys):
        path = str(tmp_path / "graph_metadata.json")
        save_metadata(property_graph, path)

        assert check_mst.main([path]) == 0
        out = capsys.readouterr().out
        assert "NetworkX total weight: 30.0" in out
        assert "✓ CORRECT" in out


class TestCreateGraphFiles:
    def test_random_graph_is_connected(self):
        graph = create_graph_files.create_random_graph(12, 0.2, seed=5)
        assert graph.vertices == 12
        assert nx.is_connected(graph.to_networkx())
        assert all(1 <= e.cost <= 10 for e in graph.edges)

    def test_same_seed_same_graph(self):
        first = create_graph_files.create_random_graph(8, 0.4, seed=9)
        second = create_graph_files.create_random_graph(8, 0.4, seed=9)
        assert first.edges == second.edges

    def test_main_writes_files(self, tmp_path, capsys):
        output_dir = str(tmp_path / "graph_data")
        assert create_graph_files.main(
            ["--nodes", "7", "--seed", "3", "--output-dir", output_dir, "--no-plot"]
        ) == 0

        assert os.path.exists(os.path.join(output_dir, "graph.mtx"))
        assert os.path.exists(os.path.join(output_dir, "graph_metadata.json"))
        assert not os.path.exists(os.path.join(output_dir, "input_graph.png"))

        mtx_path = os.path.join(output_dir, "graph.mtx")
        assert run_prim.main([mtx_path, "--use-weights", "--compare"]) == 0
