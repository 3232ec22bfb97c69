import json

import evaluate
from environments import textbook_dags


def test_default_report(capsys):
    evaluate.main([])
    out = capsys.readouterr().out
    assert "IDENTIFICATION: P(user_impact | do(error_rate))" in out
    assert "Adjust for:   ['latency_impact']" in out
    assert "code_complexity -> error_rate" in out
    assert "MARKOV BLANKETS" in out


def test_named_graph_with_query(capsys):
    evaluate.main(["--graph", "confounded_chain", "--treatment", "X", "--outcome", "Y"])
    out = capsys.readouterr().out
    assert "Strategy:     backdoor" in out
    assert "Adjust for:   ['C']" in out
    assert "C -> X" in out


def test_edge_list_frontdoor(tmp_path, capsys):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(textbook_dags.frontdoor().to_dict()))
    evaluate.main(["--edges", str(path), "--treatment", "X", "--outcome", "Y"])
    out = capsys.readouterr().out
    assert "Strategy:     frontdoor" in out
    assert "Mediators:   ['M']" in out
    assert "U -> X" in out


def test_frontdoor_disabled(tmp_path, capsys):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(textbook_dags.frontdoor().to_dict()))
    evaluate.main(["--edges", str(path), "--treatment", "X", "--outcome", "Y", "--no_frontdoor"])
    out = capsys.readouterr().out
    assert "Strategy:     unidentifiable" in out
    assert "Identifiable: False" in out


def test_query_skipped_without_treatment(capsys):
    evaluate.main(["--graph", "collider", "--independencies", "0"])
    out = capsys.readouterr().out
    assert "identification skipped" in out
    assert "A _||_ B" in out


def test_parse_args_defaults():
    args = evaluate.parse_args([])
    assert args.graph == "deployment"
    assert args.max_size == 3
    assert not args.exhaustive
