"""Patients App URLs.

Prefix: /api/
Routes:
    GET/POST       /api/patients/                   - List/Create patients
    GET            /api/patients/search/?userInput= - Exact name search
    GET/PUT/DELETE /api/patients/<pk>/              - Retrieve/Update/Deactivate
    PUT            /api/patients/<pk>/endereco/     - Create or update the address
    GET            /api/patients/<pk>/consultas/    - The patient's appointments
"""

from django.urls import path

from clinica_backend.patients.views import (
    PatientAddressView,
    PatientAppointmentsView,
    PatientDetailView,
    PatientListCreateView,
    PatientSearchView,
)

app_name = 'patients'

urlpatterns = [
    path('patients/', PatientListCreateView.as_view(), name='list'),
    path('patients/search/', PatientSearchView.as_view(), name='search'),
    path('patients/<int:pk>/', PatientDetailView.as_view(), name='detail'),
    path('patients/<int:pk>/endereco/', PatientAddressView.as_view(), name='address'),
    path('patients/<int:pk>/consultas/', PatientAppointmentsView.as_view(), name='appointments'),
]
