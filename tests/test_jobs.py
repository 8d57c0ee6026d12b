"""
채용공고 API 테스트
"""
from decimal import Decimal

import asyncpg
import pytest


@pytest.fixture
def job_row():
    return {
        "id": 1,
        "title": "Job1",
        "salary": 100,
        "equity": Decimal("0.1"),
        "company_handle": "c1",
    }


class TestCreateJob:
    """POST /jobs 테스트"""

    def test_create_job_admin(self, client, conn, admin_headers):
        conn.fetchrow.return_value = {
            "id": 7,
            "title": "J-new",
            "salary": 10,
            "equity": Decimal("0.2"),
            "company_handle": "c1",
        }

        response = client.post("/jobs", json={
            "companyHandle": "c1",
            "title": "J-new",
            "salary": 10,
            "equity": "0.2",
        }, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {
            "job": {"id": 7, "title": "J-new", "salary": 10, "equity": "0.2", "companyHandle": "c1"}
        }
        _, *args = conn.fetchrow.call_args.args
        assert args == ["J-new", 10, Decimal("0.2"), "c1"]

    def test_create_job_non_admin(self, client, u1_headers):
        response = client.post("/jobs", json={"companyHandle": "c1", "title": "J-new"},
                               headers=u1_headers)

        assert response.status_code == 401

    def test_create_job_unknown_company(self, client, conn, admin_headers):
        conn.fetchrow.side_effect = asyncpg.ForeignKeyViolationError("fk")

        response = client.post("/jobs", json={"companyHandle": "nope", "title": "J-new"},
                               headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No company: nope"

    def test_create_job_equity_out_of_range(self, client, admin_headers):
        response = client.post("/jobs", json={"companyHandle": "c1", "title": "J-new", "equity": "1.5"},
                               headers=admin_headers)

        assert response.status_code == 400

    def test_create_job_salary_over_int32(self, client, conn, admin_headers):
        response = client.post("/jobs", json={"companyHandle": "c1", "title": "J-new", "salary": 3000000000},
                               headers=admin_headers)

        assert response.status_code == 400
        conn.fetchrow.assert_not_called()


class TestGetJobs:
    """GET /jobs 테스트"""

    def test_get_jobs(self, client, conn, u1_headers, job_row):
        conn.fetch.return_value = [job_row]

        response = client.get("/jobs", headers=u1_headers)

        assert response.status_code == 200
        assert response.json() == {
            "jobs": [{"id": 1, "title": "Job1", "salary": 100, "equity": "0.1", "companyHandle": "c1"}]
        }

    def test_get_jobs_with_filters(self, client, conn, u1_headers):
        response = client.get(
            "/jobs",
            params={"title": "eng", "minSalary": 1000, "hasEquity": "true"},
            headers=u1_headers,
        )

        assert response.status_code == 200
        query, *args = conn.fetch.call_args.args
        assert "title ILIKE $1" in query
        assert "salary >= $2" in query
        assert "equity > 0" in query
        assert args == ["%eng%", 1000]

    def test_get_jobs_has_equity_false_is_ignored(self, client, conn, u1_headers):
        response = client.get("/jobs", params={"hasEquity": "false"}, headers=u1_headers)

        assert response.status_code == 200
        query, *args = conn.fetch.call_args.args
        assert "WHERE" not in query
        assert args == []

    def test_get_jobs_unknown_filter(self, client, conn, u1_headers):
        response = client.get("/jobs", params={"companyHandle": "c1"}, headers=u1_headers)

        assert response.status_code == 400
        conn.fetch.assert_not_called()

    def test_get_jobs_anon(self, client):
        response = client.get("/jobs")

        assert response.status_code == 401


class TestGetJob:
    """GET /jobs/{job_id} 테스트"""

    def test_get_job_with_company(self, client, conn, u1_headers, job_row, company_row):
        conn.fetchrow.side_effect = [job_row, company_row]

        response = client.get("/jobs/1", headers=u1_headers)

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["id"] == 1
        assert job["company"]["handle"] == "c1"
        assert job["company"]["numEmployees"] == 1
        assert "companyHandle" not in job

    def test_get_job_not_found(self, client, conn, u1_headers):
        conn.fetchrow.return_value = None

        response = client.get("/jobs/999", headers=u1_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "No job: 999"

    def test_get_job_invalid_id(self, client, u1_headers):
        response = client.get("/jobs/abc", headers=u1_headers)

        assert response.status_code == 400

    @pytest.mark.parametrize("job_id", [0, 3000000000])
    def test_get_job_id_out_of_range(self, client, conn, u1_headers, job_id):
        response = client.get(f"/jobs/{job_id}", headers=u1_headers)

        assert response.status_code == 400
        conn.fetchrow.assert_not_called()


class TestUpdateJob:
    """PATCH /jobs/{job_id} 테스트"""

    def test_update_job_admin(self, client, conn, admin_headers, job_row):
        conn.fetchrow.return_value = {**job_row, "title": "J-New", "salary": 5}

        response = client.patch("/jobs/1", json={"title": "J-New", "salary": 5}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["job"]["title"] == "J-New"
        query, *args = conn.fetchrow.call_args.args
        assert 'SET "title"=$1, "salary"=$2 WHERE id = $3' in query
        assert args == ["J-New", 5, 1]

    def test_update_job_equity(self, client, conn, admin_headers, job_row):
        conn.fetchrow.return_value = {**job_row, "equity": Decimal("0.5")}

        response = client.patch("/jobs/1", json={"equity": "0.5"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["job"]["equity"] == "0.5"
        _, *args = conn.fetchrow.call_args.args
        assert args == [Decimal("0.5"), 1]

    def test_update_job_company_handle_not_allowed(self, client, conn, admin_headers):
        response = client.patch("/jobs/1", json={"companyHandle": "c2"}, headers=admin_headers)

        assert response.status_code == 400
        conn.fetchrow.assert_not_called()

    def test_update_job_non_admin(self, client, u1_headers):
        response = client.patch("/jobs/1", json={"title": "J-New"}, headers=u1_headers)

        assert response.status_code == 401

    def test_update_job_not_found(self, client, conn, admin_headers):
        conn.fetchrow.return_value = None

        response = client.patch("/jobs/999", json={"title": "J-New"}, headers=admin_headers)

        assert response.status_code == 404

    def test_update_job_empty_body(self, client, admin_headers):
        response = client.patch("/jobs/1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"


class TestDeleteJob:
    """DELETE /jobs/{job_id} 테스트"""

    def test_delete_job_admin(self, client, conn, admin_headers):
        conn.fetchrow.return_value = {"id": 1}

        response = client.delete("/jobs/1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": 1}

    def test_delete_job_not_found(self, client, conn, admin_headers):
        conn.fetchrow.return_value = None

        response = client.delete("/jobs/999", headers=admin_headers)

        assert response.status_code == 404
