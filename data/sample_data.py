"""Sample records used to populate the clinic data store at start-up."""

from __future__ import annotations

from typing import Dict, List

from models.enums import (
    AppointmentStatus,
    DoctorStatus,
    Gender,
    HospitalStatus,
    LoginRole,
    PatientStatus,
    PresenceStatus,
    ReportStatus,
    StaffStatus,
    TransactionStatus,
)
from models.records import (
    Appointment,
    Doctor,
    Hospital,
    LoginActivity,
    Patient,
    Report,
    StaffMember,
    Transaction,
)

SEED_DAY = "2026-02-04"

sample_hospitals = [
    Hospital("h1", "City General Hospital", "123 Main St, Downtown", "+1 234-567-8900", 24, 1250, HospitalStatus.ACTIVE, "2024-01-15"),
    Hospital("h2", "Metro Health Clinic", "456 Oak Ave, Midtown", "+1 234-567-8901", 12, 680, HospitalStatus.ACTIVE, "2024-03-20"),
    Hospital("h3", "Sunrise Medical Center", "789 Pine Rd, Uptown", "+1 234-567-8902", 18, 920, HospitalStatus.ACTIVE, "2024-06-10"),
    Hospital("h4", "Valley Care Hospital", "321 Elm Blvd, Valley", "+1 234-567-8903", 15, 750, HospitalStatus.INACTIVE, "2023-09-05"),
]

sample_doctors = [
    Doctor("d1", "Dr. John Smith", "john.smith@clinic.com", "+1 234-567-8910", "Cardiologist", "h1", "City General Hospital", 248, DoctorStatus.ACTIVE, "2023-01-15"),
    Doctor("d2", "Dr. Sarah Johnson", "sarah.johnson@clinic.com", "+1 234-567-8911", "Dermatologist", "h1", "City General Hospital", 180, DoctorStatus.ACTIVE, "2023-05-20"),
    Doctor("d3", "Dr. Emily Davis", "emily.davis@clinic.com", "+1 234-567-8912", "Pediatrician", "h2", "Metro Health Clinic", 320, DoctorStatus.ACTIVE, "2022-11-10"),
    Doctor("d4", "Dr. Michael Chen", "michael.chen@clinic.com", "+1 234-567-8913", "Orthopedic", "h2", "Metro Health Clinic", 156, DoctorStatus.ON_LEAVE, "2024-02-01"),
    Doctor("d5", "Dr. Lisa Brown", "lisa.brown@clinic.com", "+1 234-567-8914", "Neurologist", "h3", "Sunrise Medical Center", 210, DoctorStatus.ACTIVE, "2023-08-15"),
]

sample_patients = [
    Patient("p1", "Sarah Johnson", "sarah@email.com", "+1 234-567-8901", 32, Gender.FEMALE, "d1", "Dr. John Smith", "h1", "Today", 8, PatientStatus.ACTIVE),
    Patient("p2", "Michael Chen", "michael@email.com", "+1 234-567-8902", 45, Gender.MALE, "d1", "Dr. John Smith", "h1", "Yesterday", 5, PatientStatus.ACTIVE),
    Patient("p3", "Emily Davis", "emily@email.com", "+1 234-567-8903", 28, Gender.FEMALE, "d1", "Dr. John Smith", "h1", "3 days ago", 12, PatientStatus.ACTIVE),
    Patient("p4", "Robert Wilson", "robert@email.com", "+1 234-567-8904", 56, Gender.MALE, "d1", "Dr. John Smith", "h1", "1 week ago", 3, PatientStatus.INACTIVE),
    Patient("p5", "Lisa Brown", "lisa@email.com", "+1 234-567-8905", 38, Gender.FEMALE, "d1", "Dr. John Smith", "h1", "2 weeks ago", 6, PatientStatus.ACTIVE),
    Patient("p6", "James Miller", "james@email.com", "+1 234-567-8906", 62, Gender.MALE, "d2", "Dr. Sarah Johnson", "h1", "Today", 4, PatientStatus.ACTIVE),
    Patient("p7", "Amanda White", "amanda@email.com", "+1 234-567-8907", 25, Gender.FEMALE, "d3", "Dr. Emily Davis", "h2", "Yesterday", 10, PatientStatus.ACTIVE),
]

sample_appointments = [
    Appointment("a1", "p1", "Sarah Johnson", "+1 234-567-8901", "d1", "09:00 AM", SEED_DAY, "General Checkup", AppointmentStatus.IN_PROGRESS),
    Appointment("a2", "p2", "Michael Chen", "+1 234-567-8902", "d1", "09:30 AM", SEED_DAY, "Follow-up Visit", AppointmentStatus.SCHEDULED),
    Appointment("a3", "p3", "Emily Davis", "+1 234-567-8903", "d1", "10:00 AM", SEED_DAY, "Consultation", AppointmentStatus.SCHEDULED),
    Appointment("a4", "p4", "Robert Wilson", "+1 234-567-8904", "d1", "08:30 AM", SEED_DAY, "ECG Test", AppointmentStatus.COMPLETED),
    Appointment("a5", "p5", "Lisa Brown", "+1 234-567-8905", "d1", "08:00 AM", SEED_DAY, "Blood Pressure Check", AppointmentStatus.COMPLETED),
    Appointment("a6", "p1", "Sarah Johnson", "+1 234-567-8901", "d1", "10:30 AM", SEED_DAY, "Lab Results Review", AppointmentStatus.SCHEDULED),
    Appointment("a7", "p6", "James Miller", "+1 234-567-8906", "d2", "11:00 AM", SEED_DAY, "Skin Examination", AppointmentStatus.SCHEDULED),
]

sample_staff = [
    StaffMember("s1", "Emily Wilson", "emily@clinic.com", "+1 234-567-8920", "Nurse", "d1", StaffStatus.ACTIVE, "2023-06-15"),
    StaffMember("s2", "Michael Brown", "michael.b@clinic.com", "+1 234-567-8921", "Receptionist", "d1", StaffStatus.ACTIVE, "2023-08-20"),
    StaffMember("s3", "Sarah Davis", "sarah.d@clinic.com", "+1 234-567-8922", "Lab Technician", "d1", StaffStatus.ACTIVE, "2024-01-10"),
    StaffMember("s4", "James Miller", "james.m@clinic.com", "+1 234-567-8923", "Medical Assistant", "d1", StaffStatus.ON_LEAVE, "2023-03-05"),
]

sample_transactions = [
    Transaction("t1", "p1", "Sarah Johnson", "d1", "Consultation", 150.0, TransactionStatus.COMPLETED, "Today"),
    Transaction("t2", "p2", "Michael Chen", "d1", "Lab Test", 85.0, TransactionStatus.COMPLETED, "Today"),
    Transaction("t3", "p3", "Emily Davis", "d1", "Follow-up", 75.0, TransactionStatus.PENDING, "Yesterday"),
    Transaction("t4", "p4", "Robert Wilson", "d1", "ECG Test", 120.0, TransactionStatus.COMPLETED, "Yesterday"),
    Transaction("t5", "p5", "Lisa Brown", "d1", "General Checkup", 100.0, TransactionStatus.REFUNDED, "2 days ago"),
]

sample_reports = [
    Report("r1", "Blood Test Report", "p1", "Sarah Johnson", "d1", "Lab Report", ReportStatus.READY, "Feb 4, 2026"),
    Report("r2", "ECG Analysis", "p2", "Michael Chen", "d1", "Diagnostic", ReportStatus.READY, "Feb 3, 2026"),
    Report("r3", "X-Ray Report", "p3", "Emily Davis", "d1", "Imaging", ReportStatus.PENDING, "Feb 3, 2026"),
    Report("r4", "Complete Health Checkup", "p4", "Robert Wilson", "d1", "General", ReportStatus.READY, "Feb 2, 2026"),
    Report("r5", "Thyroid Panel", "p5", "Lisa Brown", "d1", "Lab Report", ReportStatus.READY, "Feb 1, 2026"),
]

sample_login_activity = [
    LoginActivity("l1", "d1", "Dr. John Smith", LoginRole.DOCTOR, "City General", "2 min ago", PresenceStatus.ONLINE),
    LoginActivity("l2", "d2", "Dr. Sarah Johnson", LoginRole.DOCTOR, "Metro Health", "15 min ago", PresenceStatus.ONLINE),
    LoginActivity("l3", "s1", "Mike Wilson", LoginRole.STAFF, "City General", "1 hour ago", PresenceStatus.OFFLINE),
    LoginActivity("l4", "d5", "Dr. Emily Davis", LoginRole.DOCTOR, "Sunrise Medical", "2 hours ago", PresenceStatus.OFFLINE),
    LoginActivity("l5", "d3", "Dr. Michael Chen", LoginRole.DOCTOR, "Metro Health", "3 hours ago", PresenceStatus.OFFLINE),
]


def initial_collections() -> Dict[str, List[object]]:
    """Return fresh lists of the seed records keyed by entity kind."""

    return {
        "hospital": list(sample_hospitals),
        "doctor": list(sample_doctors),
        "patient": list(sample_patients),
        "appointment": list(sample_appointments),
        "staff": list(sample_staff),
        "transaction": list(sample_transactions),
        "report": list(sample_reports),
        "login_activity": list(sample_login_activity),
    }


__all__ = ["SEED_DAY", "initial_collections"]
