import json

import pytest

from gltf_lite.cli import main


def test_text_summary(write_triangle, capsys):
    path = write_triangle()

    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "Top-level scene nodes (scene.gltf):" in out
    assert "  - Triangle [children: 0] (mesh 0)" in out
    assert "TriangleMesh primitive 0 (TRIANGLES):" in out
    assert "  - POSITION: buffer 0, offset 0, 36 bytes" in out
    assert "  - indices: buffer 0, offset 36, 6 bytes" in out


def test_json_output(write_triangle, capsys):
    path = write_triangle()

    assert main([str(path), "--json"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["path"] == str(path)
    assert report["top_level_nodes"][0]["name"] == "Triangle"
    assert report["scene_graph"][0]["translation"] == [1.0, 2.0, 3.0]
    primitive = report["primitives"][0]
    assert primitive["mode"] == "TRIANGLES"
    assert primitive["attributes"] == {"POSITION": [0, 0, 36]}


def test_no_buffers_skips_external_files(write_triangle, capsys):
    path = write_triangle(with_bin=False)
    assert main([str(path), "--no-buffers"]) == 0
    assert "POSITION: buffer 0, offset 0, 36 bytes" in capsys.readouterr().out


def test_missing_file_is_a_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "absent.gltf")])
    assert excinfo.value.code == 2
    assert "File not found" in capsys.readouterr().err


def test_missing_buffer_file_is_reported(write_triangle, capsys):
    path = write_triangle(with_bin=False)
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 2
    assert "Failed to read buffer 0" in capsys.readouterr().err


def test_invalid_document_is_reported(tmp_path, capsys):
    path = tmp_path / "bad.gltf"
    path.write_text('{"accessors": [{"componentType": 1, "count": 1}]}', encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 2
    assert "Invalid component_type code: 1" in capsys.readouterr().err


def _write_chain(tmp_path, depth):
    nodes = [{"name": f"Joint{idx}", "children": [idx + 1]} for idx in range(depth - 1)]
    nodes.append({"name": f"Joint{depth - 1}"})
    path = tmp_path / "chain.gltf"
    path.write_text(json.dumps({"nodes": nodes, "scenes": [{"nodes": [0]}]}), encoding="utf-8")
    return path


def test_deep_hierarchy_summary(tmp_path, capsys):
    path = _write_chain(tmp_path, 1500)
    assert main([str(path)]) == 0
    assert "Scene root Joint0: 1500 node(s)" in capsys.readouterr().out


def test_deep_hierarchy_json_is_flat(tmp_path, capsys):
    path = _write_chain(tmp_path, 1500)
    assert main([str(path), "--json"]) == 0

    nodes = json.loads(capsys.readouterr().out)["scene_graph"]
    assert len(nodes) == 1500
    assert (nodes[0]["parent"], nodes[0]["children"]) == (None, [1])
    assert (nodes[-1]["index"], nodes[-1]["parent"], nodes[-1]["children"]) == (1499, 1498, [])


def test_shared_child_is_reported(tmp_path, capsys):
    path = tmp_path / "shared.gltf"
    root = {"nodes": [{"children": [1, 1]}, {}], "scenes": [{"nodes": [0]}]}
    path.write_text(json.dumps(root), encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 2
    assert "more than one parent" in capsys.readouterr().err
