"""
ScholarHub Backend — Application Route Tests
==============================================

What:  Submit, list, feedback and withdraw on the application routes.
"""

import pytest


def _application(email="student@x.com", **overrides):
    body = {
        "scholarshipId": "65f1a2b3c4d5e6f708192a3b",
        "userName": "Sam Student",
        "userEmail": email,
        "userId": "65f1a2b3c4d5e6f708192a3c",
        "phone": "+8801700000000",
        "address": "Dhaka",
        "gender": "Female",
        "applyingDegree": "Masters",
        "sscResult": "5.00",
        "hscResult": "4.90",
        "studyGap": "1 year",
        "university_name": "University of Toronto",
        "scholarship_category": "Full fund",
        "subject_category": "Engineering",
        "application_fees": 50.0,
        "service_charge": 19.99,
    }
    body.update(overrides)
    return body


class TestSubmitAndList:

    @pytest.mark.asyncio
    async def test_submitted_application_is_pending(self, test_client):
        created = await test_client.post("/applyScholarships", json=_application())
        assert created.status_code == 200
        application_id = created.json()["insertedId"]

        listed = (await test_client.get("/applyScholarship")).json()
        assert len(listed) == 1
        application = listed[0]
        assert application["_id"] == application_id
        assert application["status"] == "pending"
        assert application["userEmail"] == "student@x.com"
        assert application["applyingDegree"] == "Masters"
        assert application["applied_date"] is not None

    @pytest.mark.asyncio
    async def test_client_cannot_preset_status(self, test_client):
        await test_client.post("/applyScholarships", json=_application(status="success"))
        listed = (await test_client.get("/applyScholarship")).json()
        assert listed[0]["status"] == "pending"

    @pytest.mark.asyncio
    async def test_filter_by_email(self, test_client):
        await test_client.post("/applyScholarships", json=_application("one@x.com"))
        await test_client.post("/applyScholarships", json=_application("two@x.com"))
        await test_client.post("/applyScholarships", json=_application("one@x.com"))

        mine = (await test_client.get("/applyScholarship", params={"email": "one@x.com"})).json()
        assert len(mine) == 2
        assert {a["userEmail"] for a in mine} == {"one@x.com"}

        everything = (await test_client.get("/applyScholarship")).json()
        assert len(everything) == 3

    @pytest.mark.asyncio
    async def test_applicant_email_required(self, test_client):
        body = _application()
        del body["userEmail"]
        response = await test_client.post("/applyScholarships", json=body)
        assert response.status_code == 422


class TestFeedback:

    @pytest.mark.asyncio
    async def test_feedback_marks_only_that_application(self, test_client):
        first = (await test_client.post("/applyScholarships", json=_application())).json()
        await test_client.post("/applyScholarships", json=_application())

        response = await test_client.patch(
            f"/applyScholarships/feedback/{first['insertedId']}",
            json={"feedback": "Congratulations"},
        )
        assert response.status_code == 200
        assert response.json()["matchedCount"] == 1
        assert response.json()["modifiedCount"] == 1

        by_id = {a["_id"]: a for a in (await test_client.get("/applyScholarship")).json()}
        marked = by_id.pop(first["insertedId"])
        assert marked["status"] == "success"
        assert marked["feedback"] == "Congratulations"
        assert [a["status"] for a in by_id.values()] == ["pending"]

    @pytest.mark.asyncio
    async def test_feedback_without_body(self, test_client):
        created = (await test_client.post("/applyScholarships", json=_application())).json()

        response = await test_client.patch(f"/applyScholarships/feedback/{created['insertedId']}")
        assert response.status_code == 200

        listed = (await test_client.get("/applyScholarship")).json()
        assert listed[0]["status"] == "success"
        assert listed[0]["feedback"] is None

    @pytest.mark.asyncio
    async def test_feedback_unknown_id(self, test_client):
        response = await test_client.patch("/applyScholarships/feedback/" + "b" * 24)
        assert response.json()["matchedCount"] == 0

    @pytest.mark.asyncio
    async def test_feedback_malformed_id(self, test_client):
        response = await test_client.patch("/applyScholarships/feedback/abc")
        assert response.status_code == 400


class TestWithdraw:

    @pytest.mark.asyncio
    async def test_delete_application(self, test_client):
        created = (await test_client.post("/applyScholarships", json=_application())).json()

        response = await test_client.delete(f"/applyScholarships/{created['insertedId']}")
        assert response.json() == {"acknowledged": True, "deletedCount": 1}
        assert (await test_client.get("/applyScholarship")).json() == []
