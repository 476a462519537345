import json
from datetime import datetime, timezone

from escape_snake.scores import (
    MAX_NAME_LENGTH,
    NUMBER_HIGH_SCORES,
    NameEntry,
    Score,
    check_score,
    format_scores,
    parse_scores,
    record_score,
    update_scores,
    write_scores,
)


def table(*values):
    return [Score(player=f"p{v}", score=v) for v in values]


def test_missing_file_gives_default_table(tmp_path):
    scores = parse_scores(tmp_path / "nope.json")
    assert len(scores) == NUMBER_HIGH_SCORES
    assert all(s.player == "default" and s.score == 0 for s in scores)


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    scores = parse_scores(path)
    assert len(scores) == NUMBER_HIGH_SCORES
    assert scores[0].score == 0


def test_written_table_reads_back_sorted_and_padded(tmp_path):
    path = tmp_path / "scores.json"
    stamp = datetime(2024, 3, 1, 12, 30, 5, tzinfo=timezone.utc)
    write_scores(path, [Score("ann", 7, stamp), Score("bob", 12, stamp)])

    raw = json.loads(path.read_text())
    assert raw[0] == {"player": "ann", "score": 7, "timestamp": "2024/03/01 12:30:05"}

    scores = parse_scores(path)
    assert [s.score for s in scores[:3]] == [12, 7, 0]
    assert scores[0].player == "bob"
    assert scores[0].timestamp == stamp
    assert len(scores) == NUMBER_HIGH_SCORES


def test_check_score_finds_first_lower_entry():
    scores = table(50, 40, 40, 30, 20, 10, 5, 4, 3, 2)
    assert check_score(60, scores) == 0
    assert check_score(45, scores) == 1
    assert check_score(40, scores) == 3    # ties rank after existing entries
    assert check_score(3, scores) == 9
    assert check_score(2, scores) is None
    assert check_score(1, []) is None


def test_update_scores_drops_the_lowest():
    scores = table(50, 40, 30)
    update_scores(1, Score("new", 45), scores)
    assert [s.score for s in scores] == [50, 45, 40]


def test_record_score_persists_only_ranking_scores(tmp_path):
    path = tmp_path / "scores.json"
    scores = parse_scores(path)

    assert record_score(scores, "nobody", 0, path) is None
    assert not path.exists()

    assert record_score(scores, "somebody-long-name", 3, path) == 0
    saved = json.loads(path.read_text())
    assert saved[0]["player"] == "somebody-l"
    assert saved[0]["score"] == 3
    assert len(saved) == NUMBER_HIGH_SCORES


def test_format_scores():
    stamp = datetime(2024, 3, 1, tzinfo=timezone.utc)
    lines = format_scores([Score("ann", 7, stamp)])
    assert lines == [" 1.   7 ann        2024/03/01"]


def test_name_entry_buffers_up_to_max_length():
    entry = NameEntry(score=5, rank=0)
    for ch in "ann lee!":
        entry.type_char(ch)
    assert entry.name == "annlee"
    entry.backspace()
    assert entry.name == "annle"
    for ch in "abcdefgh":
        entry.type_char(ch)
    assert entry.name == "annleabcde"
    assert not entry.type_char("z")
    assert len(entry.name) == MAX_NAME_LENGTH


def test_name_entry_commits_typed_or_default_name(tmp_path):
    path = tmp_path / "scores.json"
    scores = parse_scores(path)

    entry = NameEntry(score=9, rank=0)
    for ch in "zoe":
        entry.type_char(ch)
    assert entry.commit(scores, path) == 0

    assert NameEntry(score=4, rank=1).commit(scores, path, default="guest") == 1
    saved = json.loads(path.read_text())
    assert [(s["player"], s["score"]) for s in saved[:3]] == [("zoe", 9), ("guest", 4), ("default", 0)]
