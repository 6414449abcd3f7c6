from hyperpaths.paper import format_result, main, paper_network
from hyperpaths.spiess_florian import compute_sf


def test_paper_network_shape():
    links, stops, destination, od = paper_network()
    assert len(links) == 10
    assert destination == "B"
    assert od == {"A": {"B": 1}}
    assert {l.from_node for l in links} | {l.to_node for l in links} == set(stops)


def test_format_result_lists_every_attractive_link():
    result = compute_sf(*paper_network())
    text = format_result(result)
    assert text.startswith("Optimal strategy:")
    for a in result.strategy.aset:
        assert f"({a.from_node}, {a.to_node})" in text
    assert "u_{i} = A: 27.750000" in text


def test_main_prints_report(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Volumes:" in out
    assert "v_{i} = A: 1.000000" in out