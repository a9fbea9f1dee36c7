from threading import Thread

from timed_quiz.core.services.scoreboard import Scoreboard


def test_snapshot_counts_correct_and_missed() -> None:
    scoreboard = Scoreboard()
    scoreboard.record_answer(1, True)
    scoreboard.record_answer(2, False)
    scoreboard.record_answer(3, True)

    row = scoreboard.snapshot(5)

    assert row.correct_answers == 2
    assert row.answered == 3
    assert row.total_questions == 5
    assert row.missed_question_ids == (2,)


def test_snapshot_is_not_affected_by_later_answers() -> None:
    scoreboard = Scoreboard()
    scoreboard.record_answer(1, True)
    row = scoreboard.snapshot(2)

    scoreboard.record_answer(2, True)

    assert row.correct_answers == 1


def test_writer_thread_updates_are_visible_after_join() -> None:
    scoreboard = Scoreboard()

    def answer_everything() -> None:
        for question_id in range(1, 101):
            scoreboard.record_answer(question_id, True)

    worker = Thread(target=answer_everything)
    worker.start()
    worker.join()

    assert scoreboard.snapshot(100).correct_answers == 100


def test_clear_resets_tally() -> None:
    scoreboard = Scoreboard()
    scoreboard.record_answer(1, False)

    scoreboard.clear()

    assert scoreboard.snapshot(1).answered == 0
    assert scoreboard.snapshot(1).missed_question_ids == ()


def test_closed_tally_ignores_later_answers() -> None:
    scoreboard = Scoreboard()
    scoreboard.record_answer(1, True)

    final = scoreboard.close(3)
    accepted = scoreboard.record_answer(2, True)

    assert not accepted
    assert final.correct_answers == 1
    assert scoreboard.snapshot(3).correct_answers == 1
    assert scoreboard.snapshot(3).answered == 1
