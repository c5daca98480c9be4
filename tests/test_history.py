from core.interface.history import NOT_BROWSING, HistoryNavigator


def test_repeated_line_is_recorded_once():
    history = HistoryNavigator()
    assert history.submit("heal")
    assert not history.submit("heal")
    assert history.entries == ("heal",)


def test_non_consecutive_repeat_is_recorded():
    history = HistoryNavigator()
    for line in ("heal", "kill", "heal"):
        history.submit(line)
    assert history.entries == ("heal", "kill", "heal")


def test_blank_lines_are_never_recorded():
    history = HistoryNavigator()
    assert not history.submit("")
    assert not history.submit("    ")
    assert len(history) == 0


def test_recall_round_trip_restores_pending_line():
    history = HistoryNavigator()
    history.submit("first")
    history.submit("second")

    line = "draft"
    line = history.recall_older(line)
    assert line == "second"
    line = history.recall_older(line)
    assert line == "first"
    assert history.pending == "draft"

    line = history.recall_newer(line)
    assert line == "second"
    line = history.recall_newer(line)
    assert line == "draft"
    assert not history.is_browsing


def test_recall_older_stops_at_oldest_entry():
    history = HistoryNavigator()
    history.submit("only")

    assert history.recall_older("draft") == "only"
    assert history.recall_older("only") == "only"
    assert history.cursor == 0
    assert history.recall_newer("only") == "draft"


def test_recall_without_history_is_a_noop():
    history = HistoryNavigator()
    assert history.recall_older("draft") == "draft"
    assert history.recall_newer("draft") == "draft"
    assert history.cursor == NOT_BROWSING
    assert history.pending == ""


def test_submit_resets_browsing_even_when_not_recorded():
    history = HistoryNavigator()
    history.submit("heal")
    history.recall_older("draft")
    assert history.is_browsing

    assert not history.submit("heal")
    assert history.cursor == NOT_BROWSING
    assert history.pending == ""
