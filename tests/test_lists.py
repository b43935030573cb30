def make_board(client, name="Board"):
    return client.post("/boards", json={"name": name}).json()


def test_create_list_defaults_position_to_zero(client):
    board = make_board(client)
    resp = client.post(f"/boards/{board['id']}/lists", json={"title": "Todo"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] is not None
    assert body == {"id": body["id"], "title": "Todo", "position": 0, "cards": []}


def test_create_list_on_missing_board_is_not_found(client):
    resp = client.post("/boards/404/lists", json={"title": "Todo"})
    assert resp.status_code == 404


def test_lists_are_ordered_by_position(client):
    board = make_board(client)
    ids = {}
    for position in (2, 0, 1):
        created = client.post(
            f"/boards/{board['id']}/lists",
            json={"title": f"p{position}", "position": position},
        ).json()
        ids[position] = created["id"]

    listed = client.get(f"/boards/{board['id']}/lists").json()
    assert [tl["id"] for tl in listed] == [ids[0], ids[1], ids[2]]


def test_lists_are_scoped_to_their_board(client):
    a = make_board(client, "a")
    b = make_board(client, "b")
    client.post(f"/boards/{a['id']}/lists", json={"title": "only in a"})
    assert client.get(f"/boards/{b['id']}/lists").json() == []


def test_duplicate_positions_are_allowed(client):
    board = make_board(client)
    first = client.post(f"/boards/{board['id']}/lists", json={"title": "one"}).json()
    second = client.post(f"/boards/{board['id']}/lists", json={"title": "two"}).json()
    listed = client.get(f"/boards/{board['id']}/lists").json()
    assert [tl["position"] for tl in listed] == [0, 0]
    assert [tl["id"] for tl in listed] == [first["id"], second["id"]]


def test_partial_update_keeps_position(client):
    board = make_board(client)
    task_list = client.post(
        f"/boards/{board['id']}/lists", json={"title": "Todo", "position": 3}
    ).json()

    resp = client.put(f"/lists/{task_list['id']}", json={"title": "Doing"})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Doing"
    assert resp.json()["position"] == 3

    resp = client.put(f"/lists/{task_list['id']}", json={"position": 1})
    assert resp.json()["title"] == "Doing"
    assert resp.json()["position"] == 1


def test_update_missing_list_is_not_found(client):
    assert client.put("/lists/77", json={"title": "x"}).status_code == 404


def test_list_embeds_its_cards_in_order(client):
    board = make_board(client)
    task_list = client.post(f"/boards/{board['id']}/lists", json={"title": "Todo"}).json()
    client.post(f"/lists/{task_list['id']}/cards", json={"title": "late", "position": 5})
    client.post(f"/lists/{task_list['id']}/cards", json={"title": "early", "position": 1})

    listed = client.get(f"/boards/{board['id']}/lists").json()
    assert [c["title"] for c in listed[0]["cards"]] == ["early", "late"]
    assert "board" not in listed[0]


def test_delete_list_cascades_to_cards(client):
    board = make_board(client)
    task_list = client.post(f"/boards/{board['id']}/lists", json={"title": "Todo"}).json()
    client.post(f"/lists/{task_list['id']}/cards", json={"title": "Card"})

    assert client.delete(f"/lists/{task_list['id']}").status_code == 204
    assert client.get(f"/boards/{board['id']}/lists").json() == []
    assert client.get(f"/lists/{task_list['id']}/cards").json() == []
