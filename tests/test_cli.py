"""
Tests for the command-line boundary.
"""

import json

import cv2

from intersection_counter.scripts.cli import main

from conftest import cross_image


def write_cross(tmp_path):
    path = tmp_path / "cross.png"
    cv2.imwrite(str(path), cross_image(110, 110, [(52, 52)]))
    return path


def test_missing_argument_prints_usage(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "usage" in captured.err
    assert captured.out == ""


def test_prints_count_only(tmp_path, capsys):
    assert main([str(write_cross(tmp_path))]) == 0
    assert capsys.readouterr().out == "1\n"


def test_json_output(tmp_path, capsys):
    assert main([str(write_cross(tmp_path)), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["count"] == 1
    assert len(data["intersections"]) == 1


def test_annotate(tmp_path, capsys):
    annot = tmp_path / "annot.png"
    assert main([str(write_cross(tmp_path)), "--annotate", str(annot)]) == 0
    assert annot.exists()


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png")]) == 1
    captured = capsys.readouterr()
    assert "Error" in captured.err
    assert captured.out == ""
