"""
Testing API via TestClient
- The client picks the target and word list, so outcomes are predictable.
"""

WORDS = ["hello", "world", "hella", "hillo", "heart", "beard"]


def start(client, target="hello", candidates=WORDS, max_tries=5):
    response = client.post("/games", json={"target": target, "candidates": candidates, "max_tries": max_tries})
    assert response.status_code == 200
    return response.json()


def test_start_and_win(client):
    """
    Flow:
    1) Start a game for "hello".
    2) Word not in the list -> 400.
    3) Valid wrong guess -> 200 + feedback, target still hidden.
    4) Winning guess -> 'won' and target revealed.
    """
    new_game = start(client)
    assert new_game["status"] == "in_progress"
    assert new_game["word_length"] == 5
    assert "target" not in new_game
    game_id = new_game["game_id"]

    response = client.post(f"/games/{game_id}/guess", json={"word": "qqqqq"})
    assert response.status_code == 400
    assert "not present in the word list" in response.json()["detail"]

    response = client.post(f"/games/{game_id}/guess", json={"word": "world"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "in_progress"
    assert body["target"] is None
    assert [c["mark"] for c in body["feedback"]["cells"]] == [
        "incorrect", "misplaced", "incorrect", "correct", "incorrect",
    ]
    assert body["feedback"]["cells"][1] == {"mark": "misplaced", "value": "o"}

    response = client.post(f"/games/{game_id}/guess", json={"word": "hello"})
    assert response.status_code == 200
    final = response.json()
    assert final["status"] == "won"
    assert final["target"] == "hello"
    assert "No more guesses" in final["note"]


def test_repeat_guess_is_a_conflict(client):
    game_id = start(client)["game_id"]

    assert client.post(f"/games/{game_id}/guess", json={"word": "world"}).status_code == 200
    response = client.post(f"/games/{game_id}/guess", json={"word": "world"})
    assert response.status_code == 409
    assert "already been guessed" in response.json()["detail"]

    state = client.get(f"/games/{game_id}").json()
    assert len(state["history"]) == 1


def test_loss_then_guessing_is_ignored(client):
    game_id = start(client, max_tries=5)["game_id"]

    for word in ["world", "hella", "hillo", "heart", "beard"]:
        r = client.post(f"/games/{game_id}/guess", json={"word": word})
        assert r.status_code == 200

    body = r.json()
    assert body["status"] == "lost"
    assert body["tries_left"] == 0
    assert body["target"] == "hello"

    # Game over: guess is not recorded
    again = client.post(f"/games/{game_id}/guess", json={"word": "hello"})
    assert again.status_code == 200
    assert again.json()["status"] == "lost"
    assert len(client.get(f"/games/{game_id}").json()["history"]) == 5


def test_board_and_end(client):
    game_id = start(client, max_tries=4)["game_id"]
    client.post(f"/games/{game_id}/guess", json={"word": "world"})

    response = client.get(f"/games/{game_id}/board", params={"pad": 6, "buffer": "he"})
    assert response.status_code == 200
    rows = response.json()["rows"]
    assert len(rows) == 4
    assert rows[1]["word"] == "he"
    assert rows[1]["cells"][2] == {"mark": "empty", "value": None}
    assert rows[3]["word"] == ""

    ended = client.post(f"/games/{game_id}/end")
    assert ended.status_code == 200
    assert ended.json()["max_tries"] == 0
    assert ended.json()["history"] == []

    # Ended game: stays over and ignores guesses
    response = client.post(f"/games/{game_id}/guess", json={"word": "hello"})
    assert response.status_code == 200
    assert response.json()["feedback"] is None


def test_unknown_game_is_404(client):
    assert client.get("/games/nope").status_code == 404
    assert client.post("/games/nope/guess", json={"word": "hello"}).status_code == 404
    assert client.get("/games/nope/board").status_code == 404
    assert client.post("/games/nope/end").status_code == 404


def test_request_validation(client):
    assert client.post("/games", json={"target": "", "candidates": ["a"]}).status_code == 422
    assert client.post("/games", json={"target": "hello", "candidates": ["hello", ""]}).status_code == 422
    assert client.post("/games", json={"target": "hello", "candidates": ["hello"], "max_tries": -1}).status_code == 422


def test_zero_try_game_is_over_from_the_start(client):
    game_id = start(client, max_tries=0)["game_id"]

    state = client.get(f"/games/{game_id}").json()
    assert state["game_over"] is True

    # over from the start, so the store never forwards the guess
    response = client.post(f"/games/{game_id}/guess", json={"word": "hello"})
    assert response.status_code == 200
    assert response.json()["status"] == "lost"


def test_board_with_typed_row_longer_than_target_is_400(client):
    game_id = start(client)["game_id"]

    response = client.get(f"/games/{game_id}/board", params={"buffer": "helloworld"})
    assert response.status_code == 400
    assert "not the same length" in response.json()["detail"]
