"""
ScholarHub Backend — Review Route Tests
=========================================
"""

import pytest


def _review(email="reviewer@x.com", rating=4.5):
    return {
        "scholarshipId": "65f1a2b3c4d5e6f708192a3b",
        "scholarship_name": "Global Excellence Scholarship",
        "university_name": "University of Toronto",
        "userName": "Riley Reviewer",
        "userEmail": email,
        "userImage": "https://example.com/riley.png",
        "rating": rating,
        "comment": "Smooth process.",
    }


class TestReviews:

    @pytest.mark.asyncio
    async def test_post_and_list(self, test_client):
        created = await test_client.post("/reviews", json=_review())
        assert created.status_code == 200

        reviews = (await test_client.get("/reviews")).json()
        assert len(reviews) == 1
        review = reviews[0]
        assert review["_id"] == created.json()["insertedId"]
        assert review["userImage"] == "https://example.com/riley.png"
        assert review["rating"] == 4.5
        assert review["review_date"] is not None

    @pytest.mark.asyncio
    async def test_my_reviews_filters_by_email(self, test_client):
        await test_client.post("/reviews", json=_review("me@x.com"))
        await test_client.post("/reviews", json=_review("you@x.com"))

        mine = (await test_client.get("/reviews/myReviews", params={"email": "me@x.com"})).json()
        assert [r["userEmail"] for r in mine] == ["me@x.com"]

    @pytest.mark.asyncio
    async def test_my_reviews_requires_email(self, test_client):
        response = await test_client.get("/reviews/myReviews")
        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [5.5, -1])
    async def test_rating_out_of_range(self, test_client, rating):
        response = await test_client.post("/reviews", json=_review(rating=rating))
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_review(self, test_client):
        created = (await test_client.post("/reviews", json=_review())).json()

        response = await test_client.delete(f"/reviews/{created['insertedId']}")
        assert response.json()["deletedCount"] == 1
        assert (await test_client.get("/reviews")).json() == []

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, test_client):
        response = await test_client.delete("/reviews/12345")
        assert response.status_code == 400
