# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.
# Sans cet import, les FK comme teachers.user_id → users.id échouent
# avec NoReferencedTableError si user.py n'est pas chargé avant timetable.py.

from app.models.user import User, UserSession  # noqa: F401  (doit précéder teacher)
from app.models.filiere import Filiere  # noqa: F401
from app.models.school_class import SchoolClass  # noqa: F401
from app.models.student import Student  # noqa: F401
from app.models.internship import Internship, PeriodeDeStage, Service  # noqa: F401
from app.models.attendance import Attendance, InternshipAttendance  # noqa: F401
from app.models.timetable import Room, Subject, Teacher, Timetable  # noqa: F401
