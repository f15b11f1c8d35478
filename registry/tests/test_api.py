"""
Integration tests for the doctor and patient endpoints.

These tests walk each collection through create, list, fetch, update,
paginate and delete using Django REST Framework's APIClient within the
APITestCase base class.

To run the tests:

```
pytest -q registry/tests
```
"""

from rest_framework.test import APITestCase
from rest_framework import status

from ..models import Doctor, Patient, AuditEvent


class DoctorAPITests(APITestCase):
    def setUp(self) -> None:
        """Seed two doctors through the API so ids are server generated."""
        self.cardio = self.client.post(
            "/doctors", {"name": "Dr. Ada Park", "speciality": "Cardiology"}, format="json"
        ).data["doctor"]
        self.derm = self.client.post(
            "/doctors", {"name": "Dr. Felix Hahn", "speciality": "Dermatology"}, format="json"
        ).data["doctor"]

    def test_create_returns_envelope_with_generated_id(self):
        response = self.client.post("/doctors", {"name": "Dr. Rosa Lind", "speciality": "Oncology"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], 201)
        self.assertEqual(response.data["message"], "Doctor created successfully")
        doctor = response.data["doctor"]
        self.assertEqual(doctor["name"], "Dr. Rosa Lind")
        self.assertEqual(doctor["speciality"], "Oncology")
        self.assertEqual(len(doctor["id"]), 36)
        self.assertIsNotNone(doctor["createdAt"])
        self.assertIsNone(doctor["updatedAt"])
        self.assertTrue(Doctor.objects.filter(id=doctor["id"]).exists())

    def test_list_returns_all_doctors(self):
        response = self.client.get("/doctors")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Doctors retrieved successfully")
        ids = {d["id"] for d in response.data["doctors"]}
        self.assertEqual(ids, {self.cardio["id"], self.derm["id"]})

    def test_get_by_id(self):
        response = self.client.get(f"/doctors/{self.cardio['id']}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["doctor"], self.cardio)

    def test_get_unknown_id_is_404(self):
        response = self.client.get("/doctors/does-not-exist")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"status": 404, "message": "Doctor with id = does-not-exist not found"})

    def test_create_rejects_missing_or_wrong_typed_fields(self):
        for body in (
            {"name": "Dr. No Speciality"},
            {"speciality": "Cardiology"},
            {"name": 12, "speciality": "Cardiology"},
            {"name": "   ", "speciality": "Cardiology"},
            {"name": "Dr. X", "speciality": None},
        ):
            response = self.client.post("/doctors", body, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, body)
            self.assertEqual(response.data["status"], 400)
            self.assertIn("'name' and 'speciality'", response.data["error"])
        self.assertEqual(Doctor.objects.count(), 2)

    def test_update_merges_and_stamps_updated_at(self):
        response = self.client.put(
            f"/doctors/{self.cardio['id']}",
            {"name": "Dr. Ada Park-Lee", "speciality": "Cardiology", "id": "hijack", "createdAt": "1999-01-01"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Doctor updated successfully")
        doctor = response.data["doctor"]
        self.assertEqual(doctor["id"], self.cardio["id"])
        self.assertEqual(doctor["name"], "Dr. Ada Park-Lee")
        self.assertEqual(doctor["createdAt"], self.cardio["createdAt"])
        self.assertIsNotNone(doctor["updatedAt"])
        self.assertFalse(Doctor.objects.filter(id="hijack").exists())

    def test_update_validates_before_lookup(self):
        bad = self.client.put("/doctors/unknown", {"name": "Dr. X"}, format="json")
        self.assertEqual(bad.status_code, status.HTTP_400_BAD_REQUEST)
        missing = self.client.put("/doctors/unknown", {"name": "Dr. X", "speciality": "ENT"}, format="json")
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_returns_removed_doctor(self):
        response = self.client.delete(f"/doctors/{self.derm['id']}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Doctor deleted successfully")
        self.assertEqual(response.data["doctor"]["id"], self.derm["id"])
        self.assertEqual(self.client.get(f"/doctors/{self.derm['id']}").status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.delete(f"/doctors/{self.derm['id']}").status_code, status.HTTP_404_NOT_FOUND)

    def test_mutations_are_audited(self):
        self.client.put(f"/doctors/{self.cardio['id']}", {"name": "Dr. A", "speciality": "Cardiology"}, format="json")
        self.client.delete(f"/doctors/{self.cardio['id']}")
        actions = list(
            AuditEvent.objects.filter(object_id=self.cardio["id"]).order_by("id").values_list("action", flat=True)
        )
        self.assertEqual(actions, ["doctor.create", "doctor.update", "doctor.delete"])


class PatientAPITests(APITestCase):
    def test_crud_round_trip(self):
        created = self.client.post("/patients", {"name": "Ivy Chen", "age": 29, "gender": "female"}, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(created.data["message"], "Patient created successfully")
        pid = created.data["patient"]["id"]

        fetched = self.client.get(f"/patients/{pid}")
        self.assertEqual(fetched.data["patient"]["age"], 29)

        updated = self.client.put(f"/patients/{pid}", {"name": "Ivy Chen", "age": 30, "gender": "female"}, format="json")
        self.assertEqual(updated.status_code, status.HTTP_200_OK)
        self.assertEqual(updated.data["patient"]["age"], 30)
        self.assertEqual(Patient.objects.get(id=pid).age, 30)

        listed = self.client.get("/patients")
        self.assertEqual([p["id"] for p in listed.data["patients"]], [pid])

        deleted = self.client.delete(f"/patients/{pid}")
        self.assertEqual(deleted.data["message"], "Patient deleted successfully")
        self.assertFalse(Patient.objects.exists())

    def test_age_must_be_a_json_number(self):
        for age in ("30", True, 30.5, -1, None):
            response = self.client.post("/patients", {"name": "Ivy", "age": age, "gender": "female"}, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, age)
            self.assertIn("age", response.data["fields"])

    def test_age_zero_and_integral_float_are_accepted(self):
        newborn = self.client.post("/patients", {"name": "Baby Roe", "age": 0, "gender": "female"}, format="json")
        self.assertEqual(newborn.status_code, status.HTTP_201_CREATED)
        self.assertEqual(newborn.data["patient"]["age"], 0)
        whole = self.client.post("/patients", {"name": "Ann Roe", "age": 41.0, "gender": "female"}, format="json")
        self.assertEqual(whole.status_code, status.HTTP_201_CREATED)
        self.assertEqual(whole.data["patient"]["age"], 41)

    def test_unknown_patient_is_404(self):
        response = self.client.delete("/patients/nope")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Patient with id = nope not found")
