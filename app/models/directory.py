"""Seed rosters for the in-memory clinic directory."""

from app.schemas.directory import ClinicRecord, ServiceRecord, UserRecord, UserRole

clinics: tuple[ClinicRecord, ...] = (
    ClinicRecord(
        id="clinic-001",
        name="SmileBright Dental Care",
        timezone="America/Los_Angeles",
    ),
    ClinicRecord(
        id="clinic-002",
        name="Family Dental Care Center",
        timezone="America/Los_Angeles",
    ),
)

users: tuple[UserRecord, ...] = (
    # Administration
    UserRecord(
        id="super-admin-001",
        first_name="Sarah",
        last_name="Johnson",
        email="admin@dentalOne.com",
        role=UserRole.SUPER_ADMIN,
        phone="+1 (555) 123-4567",
    ),
    UserRecord(
        id="admin-001",
        first_name="Michael",
        last_name="Chen",
        email="admin@smilebright.com",
        role=UserRole.ADMIN,
        clinic_id="clinic-001",
        phone="+1 (555) 234-5678",
    ),
    UserRecord(
        id="admin-002",
        first_name="Emily",
        last_name="Rodriguez",
        email="admin@dentalcare.com",
        role=UserRole.ADMIN,
        clinic_id="clinic-002",
        phone="+1 (555) 345-6789",
    ),
    # Doctors
    UserRecord(
        id="doctor-001",
        first_name="David",
        last_name="Smith",
        email="dr.smith@smilebright.com",
        role=UserRole.DOCTOR,
        clinic_id="clinic-001",
        phone="+1 (555) 456-7890",
    ),
    UserRecord(
        id="doctor-002",
        first_name="Jennifer",
        last_name="Williams",
        email="dr.williams@smilebright.com",
        role=UserRole.DOCTOR,
        clinic_id="clinic-001",
        phone="+1 (555) 567-8901",
    ),
    UserRecord(
        id="doctor-003",
        first_name="Carlos",
        last_name="Martinez",
        email="dr.martinez@dentalcare.com",
        role=UserRole.DOCTOR,
        clinic_id="clinic-002",
        phone="+1 (555) 678-9012",
    ),
    # Front desk and support staff
    UserRecord(
        id="staff-001",
        first_name="Lisa",
        last_name="Brown",
        email="lisa.brown@smilebright.com",
        role=UserRole.RECEPTIONIST,
        clinic_id="clinic-001",
        phone="+1 (555) 789-0123",
    ),
    UserRecord(
        id="staff-002",
        first_name="Mark",
        last_name="Davis",
        email="mark.davis@smilebright.com",
        role=UserRole.STAFF,
        clinic_id="clinic-001",
        phone="+1 (555) 890-1234",
    ),
    UserRecord(
        id="staff-003",
        first_name="Anna",
        last_name="Garcia",
        email="anna.garcia@dentalcare.com",
        role=UserRole.RECEPTIONIST,
        clinic_id="clinic-002",
        phone="+1 (555) 901-2345",
    ),
    UserRecord(
        id="staff-004",
        first_name="Robert",
        last_name="Lee",
        email="robert.lee@dentalcare.com",
        role=UserRole.STAFF,
        clinic_id="clinic-002",
        phone="+1 (555) 012-3456",
    ),
    # Patients
    UserRecord(
        id="patient-001",
        first_name="John",
        last_name="Doe",
        email="john.doe@email.com",
        role=UserRole.PATIENT,
        clinic_id="clinic-001",
        phone="+1 (555) 111-2222",
    ),
    UserRecord(
        id="patient-002",
        first_name="Mary",
        last_name="Wilson",
        email="mary.wilson@email.com",
        role=UserRole.PATIENT,
        clinic_id="clinic-001",
        phone="+1 (555) 222-3333",
    ),
    UserRecord(
        id="patient-003",
        first_name="James",
        last_name="Taylor",
        email="james.taylor@email.com",
        role=UserRole.PATIENT,
        clinic_id="clinic-002",
        phone="+1 (555) 333-4444",
    ),
    UserRecord(
        id="patient-004",
        first_name="Lisa",
        last_name="Johnson",
        email="lisa.johnson@email.com",
        role=UserRole.PATIENT,
        clinic_id="clinic-001",
        phone="+1 (555) 444-5555",
    ),
    UserRecord(
        id="patient-005",
        first_name="Robert",
        last_name="Brown",
        email="robert.brown@email.com",
        role=UserRole.PATIENT,
        clinic_id="clinic-001",
        phone="+1 (555) 555-6666",
    ),
)


def _service(service_id: str, name: str, category: str, duration: int, cost: float) -> ServiceRecord:
    return ServiceRecord(id=service_id, name=name, category=category, duration=duration, cost=cost)


services: tuple[ServiceRecord, ...] = (
    _service("service-001", "Regular Cleaning", "Preventive Care", 45, 120),
    _service("service-002", "Dental Examination", "Preventive Care", 30, 80),
    _service("service-003", "Fluoride Treatment", "Preventive Care", 20, 50),
    _service("service-004", "Dental Sealants", "Preventive Care", 30, 75),
    _service("service-005", "Dental Filling", "Restorative Dentistry", 60, 180),
    _service("service-006", "Dental Crown", "Restorative Dentistry", 120, 950),
    _service("service-007", "Dental Bridge", "Restorative Dentistry", 150, 1200),
    _service("service-008", "Root Canal Treatment", "Restorative Dentistry", 90, 800),
    _service("service-009", "Teeth Whitening", "Cosmetic Dentistry", 75, 400),
    _service("service-010", "Porcelain Veneers", "Cosmetic Dentistry", 120, 1100),
    _service("service-011", "Dental Bonding", "Cosmetic Dentistry", 45, 250),
    _service("service-012", "Tooth Extraction", "Oral Surgery", 45, 200),
    _service("service-013", "Wisdom Tooth Removal", "Oral Surgery", 90, 350),
    _service("service-014", "Dental Implant", "Oral Surgery", 180, 2500),
    _service("service-015", "Traditional Braces", "Orthodontics", 60, 4500),
    _service("service-016", "Clear Aligners", "Orthodontics", 45, 3800),
    _service("service-017", "Retainer", "Orthodontics", 30, 300),
    _service("service-018", "Children's Cleaning", "Pediatric Dentistry", 30, 90),
    _service("service-019", "Space Maintainer", "Pediatric Dentistry", 45, 200),
    _service("service-020", "Emergency Consultation", "Emergency Dentistry", 30, 120),
)

# Services the synthetic appointment set books against
GENERATED_SERVICE_CATEGORY = "Preventive Care"
