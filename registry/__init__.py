"""Registry application for the clinic backend.

This package contains models, serializers, views and route registrations
for doctors, patients, appointments, patient records and medications.
"""
