def make_survey(client, headers, title="Favorite food?"):
    response = client.post(
        "/api/surveys",
        json={"survey": {"title": title, "option1": "pizza", "option2": "hot dog"}},
        headers=headers,
    )
    return response.json()["survey"]["id"]


def test_create_answer(client, alice, bob):
    survey_id = make_survey(client, alice[1])
    response = client.post("/api/answers", json={"answer": {"survey": survey_id, "value": "pizza"}}, headers=bob[1])
    assert response.status_code == 201
    answer = response.json()["answer"]
    assert answer["respondent"] == bob[0]
    assert answer["survey"] == survey_id
    assert answer["value"] == "pizza"


def test_answer_value_is_not_checked_against_options(client, alice, bob):
    survey_id = make_survey(client, alice[1])
    response = client.post("/api/answers", json={"survey": survey_id, "value": "tacos"}, headers=bob[1])
    assert response.status_code == 201


def test_second_answer_conflicts(client, alice, bob):
    survey_id = make_survey(client, alice[1])
    first = client.post("/api/answers", json={"survey": survey_id, "value": "pizza"}, headers=bob[1])
    assert first.status_code == 201

    second = client.post("/api/answers", json={"survey": survey_id, "value": "hot dog"}, headers=bob[1])
    assert second.status_code == 409
    assert second.json()["detail"] == "You have already taken this survey"

    answers = client.get("/api/answers", params={"survey": survey_id}, headers=bob[1]).json()["answers"]
    assert [(a["respondent"], a["value"]) for a in answers] == [(bob[0], "pizza")]


def test_same_user_can_answer_different_surveys(client, alice, bob):
    first = make_survey(client, alice[1], "One?")
    second = make_survey(client, alice[1], "Two?")
    assert client.post("/api/answers", json={"survey": first, "value": "pizza"}, headers=bob[1]).status_code == 201
    assert client.post("/api/answers", json={"survey": second, "value": "pizza"}, headers=bob[1]).status_code == 201


def test_empty_answer_rejected(client, alice, bob):
    survey_id = make_survey(client, alice[1])
    response = client.post("/api/answers", json={"survey": survey_id, "value": ""}, headers=bob[1])
    assert response.status_code == 422
    assert client.get("/api/answers", headers=bob[1]).json() == {"answers": []}


def test_answer_for_missing_survey(client, bob):
    response = client.post("/api/answers", json={"survey": 999, "value": "pizza"}, headers=bob[1])
    assert response.status_code == 404


def test_list_answers(client, alice, bob):
    first = make_survey(client, alice[1], "One?")
    second = make_survey(client, alice[1], "Two?")
    client.post("/api/answers", json={"survey": first, "value": "pizza"}, headers=bob[1])
    client.post("/api/answers", json={"survey": second, "value": "hot dog"}, headers=alice[1])

    everything = client.get("/api/answers", headers=alice[1]).json()["answers"]
    assert len(everything) == 2
    only_second = client.get("/api/answers", params={"survey": second}, headers=alice[1]).json()["answers"]
    assert [a["value"] for a in only_second] == ["hot dog"]


def test_answer_for_huge_survey_id(client, bob):
    response = client.post("/api/answers", json={"survey": 99999999999999999999, "value": "pizza"}, headers=bob[1])
    assert response.status_code == 404
    listed = client.get("/api/answers", params={"survey": "99999999999999999999"}, headers=bob[1])
    assert listed.json() == {"answers": []}
