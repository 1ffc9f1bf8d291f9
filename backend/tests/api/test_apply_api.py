MISSING_ID = "0123456789abcdef01234567"


def post_job(client, job_form, poster="poster"):
    job_form["userId"] = poster
    return client.post("/jobs", data=job_form).json()["jobId"]


def test_apply_success_notifies_poster(client, gateway, job_form):
    job_id = post_job(client, job_form)

    response = client.post(f"/apply/{job_id}", json={"userId": "applicant", "resumeLink": "http://cv"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Application submitted successfully"
    assert body["applicationId"]

    notifications = client.get("/notifications/poster").json()
    assert len(notifications) == 1
    assert notifications[0]["userId"] == "poster"
    assert notifications[0]["jobId"] == job_id
    assert "Engineer" in notifications[0]["message"]
    assert client.get("/notifications/applicant").json() == []


def test_apply_to_own_job(client, gateway, job_form):
    job_id = post_job(client, job_form)

    response = client.post(f"/apply/{job_id}", json={"userId": "poster", "resumeLink": "http://cv"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "You cannot apply for your own job"
    assert body["error"]["code"] == "OWN_JOB"
    assert gateway.applications == {}
    assert gateway.notifications == {}


def test_apply_to_missing_job(client):
    response = client.post(f"/apply/{MISSING_ID}", json={"userId": "applicant", "resumeLink": "x"})

    assert response.status_code == 404
    assert response.json()["message"] == "Job not found"


def test_apply_with_malformed_job_id(client):
    response = client.post("/apply/123", json={"userId": "applicant", "resumeLink": "x"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ID"


def test_apply_storage_failure(client, gateway, job_form):
    job_id = post_job(client, job_form)
    gateway.fail_on.add("insert_application")

    response = client.post(f"/apply/{job_id}", json={"userId": "applicant", "resumeLink": "x"})

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to apply for the job"
    assert gateway.notifications == {}


def test_apply_without_body(client, job_form):
    job_id = post_job(client, job_form)

    response = client.post(f"/apply/{job_id}")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_apply_notification_failure_keeps_application(client, gateway, job_form):
    job_id = post_job(client, job_form)
    gateway.fail_on.add("insert_notification")

    response = client.post(f"/apply/{job_id}", json={"userId": "applicant", "resumeLink": "x"})

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to apply for the job"
    assert len(gateway.applications) == 1
    assert gateway.notifications == {}


def test_apply_with_numeric_user_id(client, gateway, job_form):
    job_id = post_job(client, job_form, poster="123")

    response = client.post(f"/apply/{job_id}", json={"userId": 123, "resumeLink": "x"})

    # 숫자 123 과 문자열 "123" 은 다른 ID
    assert response.status_code == 201
    application = next(iter(gateway.applications.values()))
    assert application.user_id == 123
    assert client.get("/notifications/123").json()[0]["jobId"] == job_id
