"""Localization table for task text and fixed UI labels.

Task text is keyed by the canonical catalog key; English comes straight from
the catalog so there is a single English source. UI labels are keyed by a
stable label id. Resolution chain for labels: requested language -> English
-> label id.
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple

from catalog import CATALOG
from models import Category, Language, TaskStatus

EN = Language.ENGLISH
ES = Language.SPANISH
VI = Language.VIETNAMESE

TextPair = Tuple[str, str]

_FOREIGN_TASK_TEXT: Dict[str, Dict[Language, TextPair]] = {
    'iep_participation': {
        ES: ('Participación en el IEP',
             'Haga que su hijo participe en sus reuniones del IEP; aprenda sobre los IEP dirigidos por el estudiante'),
        VI: ('Tham Gia IEP',
             'Cho con tham gia các cuộc họp IEP; tìm hiểu về IEP do học sinh dẫn dắt'),
    },
    'disability_understanding': {
        ES: ('Comprensión de la Discapacidad',
             'Enseñe a su hijo sobre su discapacidad; identifique fortalezas y necesidades'),
        VI: ('Hiểu Biết Về Khuyết Tật',
             'Dạy con về khuyết tật của mình; xác định điểm mạnh và nhu cầu'),
    },
    'individual_transition_plan': {
        ES: ('Plan Individual de Transición',
             'Aprenda sobre el Plan Individual de Transición (ITP); pregunte al equipo 504 sobre la '
             'planificación de la transición'),
        VI: ('Kế Hoạch Chuyển Tiếp Cá Nhân',
             'Tìm hiểu về Kế Hoạch Chuyển Tiếp Cá Nhân (ITP); hỏi nhóm 504 về việc lập kế hoạch chuyển tiếp'),
    },
    'self_care_routines': {
        ES: ('Rutinas de Autocuidado',
             'Desarrolle rutinas de autocuidado; asigne tareas domésticas'),
        VI: ('Thói Quen Tự Chăm Sóc',
             'Xây dựng thói quen tự chăm sóc; giao việc nhà'),
    },
    'high_school_planning': {
        ES: ('Planificación de la Preparatoria',
             '¿Diploma de preparatoria? ¿Nueva vía hacia el diploma? ¿Certificado de finalización?'),
        VI: ('Lập Kế Hoạch Trung Học',
             'Bằng tốt nghiệp trung học? Lộ trình mới để lấy bằng? Chứng chỉ hoàn thành?'),
    },
    'post_high_school_planning': {
        ES: ('Planificación Después de la Preparatoria',
             'Solicite ingreso a la universidad y/u otros programas y oportunidades después de la preparatoria'),
        VI: ('Lập Kế Hoạch Sau Trung Học',
             'Nộp đơn vào đại học và/hoặc các chương trình và cơ hội khác sau trung học'),
    },
    'legal_documents': {
        ES: ('Documentos Legales',
             'Obtenga licencia de conducir/identificación, pasaporte, registro para votar, Servicio Selectivo'),
        VI: ('Giấy Tờ Pháp Lý',
             'Lấy bằng lái xe/thẻ căn cước, hộ chiếu, đăng ký cử tri, đăng ký Selective Service'),
    },
    'decision_making_assessment': {
        ES: ('Evaluación de Toma de Decisiones',
             'Determine la capacidad del joven para tomar decisiones a los 18 años'),
        VI: ('Đánh Giá Khả Năng Ra Quyết Định',
             'Xác định khả năng tự ra quyết định của thanh thiếu niên khi 18 tuổi'),
    },
    'healthcare_transition': {
        ES: ('Transición de Atención Médica',
             'Navegue la transición de la atención pediátrica a la de adultos; revise la cobertura del seguro; '
             'investigue la cláusula de elegibilidad continua'),
        VI: ('Chuyển Tiếp Chăm Sóc Sức Khỏe',
             'Chuyển từ chăm sóc nhi khoa sang chăm sóc người lớn; xem lại phạm vi bảo hiểm; '
             'tìm hiểu điều khoản tiếp tục đủ điều kiện'),
    },
    'letter_of_intent': {
        ES: ('Carta de Intención',
             'Comience una Carta de Intención; revísela anualmente'),
        VI: ('Thư Bày Tỏ Nguyện Vọng',
             'Bắt đầu viết Thư Bày Tỏ Nguyện Vọng; xem lại hằng năm'),
    },
    'adult_options': {
        ES: ('Opciones para Adultos',
             'Explore opciones para la vida adulta: Departamento de Rehabilitación, Centro Regional, '
             'educación/capacitación, vivienda, tecnología de asistencia'),
        VI: ('Lựa Chọn Khi Trưởng Thành',
             'Tìm hiểu các lựa chọn khi trưởng thành: Sở Phục Hồi Chức Năng, Trung Tâm Khu Vực, '
             'giáo dục/đào tạo, nhà ở, công nghệ hỗ trợ'),
    },
    'public_benefits': {
        ES: ('Beneficios Públicos',
             'Investigue beneficios públicos: CalFresh, Servicios de Apoyo en el Hogar (IHSS), '
             'Seguridad de Ingreso Suplementario (SSI), MediCal, Medicare'),
        VI: ('Phúc Lợi Công Cộng',
             'Tìm hiểu các phúc lợi công cộng: CalFresh, Dịch Vụ Hỗ Trợ Tại Nhà (IHSS), '
             'Thu Nhập An Sinh Bổ Sung (SSI), MediCal, Medicare'),
    },
    'financial_planning': {
        ES: ('Planificación Financiera',
             'Explore la planificación financiera/patrimonial: cuentas ABLE, fideicomisos para necesidades '
             'especiales, tutela, poder notarial duradero, toma de decisiones con apoyo'),
        VI: ('Lập Kế Hoạch Tài Chính',
             'Tìm hiểu kế hoạch tài chính/di sản: tài khoản ABLE, quỹ ủy thác cho nhu cầu đặc biệt, '
             'quyền giám hộ, giấy ủy quyền lâu dài, hỗ trợ ra quyết định'),
    },
    'regional_center_services': {
        ES: ('Servicios del Centro Regional',
             'Clientes del Centro Regional: comprenda los servicios postsecundarios; explore la Autodeterminación'),
        VI: ('Dịch Vụ Trung Tâm Khu Vực',
             'Khách hàng của Trung Tâm Khu Vực: tìm hiểu các dịch vụ sau trung học; tìm hiểu chương trình '
             'Tự Quyết'),
    },
    'independence_skills': {
        ES: ('Habilidades de Independencia',
             'Aumente la independencia en el hogar; promueva la independencia en la toma de decisiones, '
             'la comunicación, las habilidades para la vida y más'),
        VI: ('Kỹ Năng Tự Lập',
             'Tăng tính tự lập ở nhà; khuyến khích tự lập trong việc lựa chọn, giao tiếp, kỹ năng sống và hơn nữa'),
    },
    'transportation_strategies': {
        ES: ('Estrategias de Transporte',
             'Desarrolle estrategias de transporte/movilidad'),
        VI: ('Chiến Lược Đi Lại',
             'Xây dựng chiến lược đi lại/di chuyển'),
    },
    'self_advocacy_skills': {
        ES: ('Habilidades de Autodefensa',
             'Desarrolle desde temprano habilidades de autodefensa/autodeterminación. Investigue la '
             'planificación centrada en la persona basada en fortalezas; desarrolle un plan centrado en la persona'),
        VI: ('Kỹ Năng Tự Bênh Vực',
             'Sớm phát triển kỹ năng tự bênh vực/tự quyết. Tìm hiểu cách lập kế hoạch lấy con người làm trung tâm '
             'dựa trên điểm mạnh; xây dựng kế hoạch lấy con người làm trung tâm'),
    },
    'assistive_technology': {
        ES: ('Tecnología de Asistencia',
             'Investigue herramientas de tecnología de asistencia que aumenten la participación y las oportunidades'),
        VI: ('Công Nghệ Hỗ Trợ',
             'Tìm hiểu các công cụ công nghệ hỗ trợ giúp tăng sự tham gia và cơ hội'),
    },
    'health_education': {
        ES: ('Educación para la Salud',
             'Hable sobre la pubertad, la sexualidad y la seguridad'),
        VI: ('Giáo Dục Sức Khỏe',
             'Nói chuyện về tuổi dậy thì, giới tính và an toàn'),
    },
    'disability_rights': {
        ES: ('Derechos de las Personas con Discapacidad',
             'Explore la historia de los derechos de las personas con discapacidad'),
        VI: ('Quyền Của Người Khuyết Tật',
             'Tìm hiểu lịch sử quyền của người khuyết tật'),
    },
    'work_programs': {
        ES: ('Programas de Trabajo',
             'Explore WorkAbility y/o programas de asociación para la transición; comprenda los servicios del '
             'Departamento de Rehabilitación, incluidos los servicios estudiantiles y de empleo con apoyo'),
        VI: ('Chương Trình Việc Làm',
             'Tìm hiểu WorkAbility và/hoặc các chương trình hợp tác chuyển tiếp; tìm hiểu dịch vụ của Sở Phục Hồi '
             'Chức Năng, bao gồm dịch vụ cho học sinh và dịch vụ việc làm có hỗ trợ'),
    },
    'career_planning': {
        ES: ('Planificación Profesional',
             'Desarrolle una meta de empleo postsecundario como parte de su ITP; desarrolle y revise un plan '
             'profesional'),
        VI: ('Lập Kế Hoạch Nghề Nghiệp',
             'Đặt mục tiêu việc làm sau trung học trong ITP; xây dựng và xem lại kế hoạch nghề nghiệp'),
    },
    'work_experience': {
        ES: ('Experiencia Laboral',
             'Adquiera experiencia laboral: pasantía/voluntariado/empleo; practique llenar solicitudes de '
             'empleo y escribir currículums'),
        VI: ('Kinh Nghiệm Làm Việc',
             'Tích lũy kinh nghiệm làm việc: thực tập/tình nguyện/việc làm; tập điền đơn xin việc, viết sơ yếu '
             'lý lịch'),
    },
    'employment_services': {
        ES: ('Servicios de Empleo',
             'Clientes del Centro Regional: explore servicios de empleo/trabajo con apoyo y el programa de '
             'Pasantías Pagadas'),
        VI: ('Dịch Vụ Việc Làm',
             'Khách hàng của Trung Tâm Khu Vực: tìm hiểu dịch vụ việc làm có hỗ trợ và chương trình '
             'Thực Tập Có Lương'),
    },
}


def _build_task_text() -> Dict[str, Dict[Language, TextPair]]:
    table: Dict[str, Dict[Language, TextPair]] = {}
    for entry in CATALOG:
        row: Dict[Language, TextPair] = {EN: (entry.title, entry.description)}
        row.update(_FOREIGN_TASK_TEXT.get(entry.key, {}))
        table[entry.key] = row
    return table


TASK_TEXT: Dict[str, Dict[Language, TextPair]] = _build_task_text()

# Any known title (in any language) or key -> canonical key
_TITLE_INDEX: Dict[str, str] = {}
for _key, _row in TASK_TEXT.items():
    _TITLE_INDEX[_key] = _key
    for _title, _ in _row.values():
        _TITLE_INDEX[_title] = _key


LABELS: Dict[str, Dict[Language, str]] = {
    # --- screens / buttons ---
    'app_title': {EN: 'PHP Planner', ES: 'PHP Planificador', VI: 'PHP Kế Hoạch'},
    'done': {EN: 'Done', ES: 'Hecho', VI: 'Xong'},
    'cancel': {EN: 'Cancel', ES: 'Cancelar', VI: 'Hủy'},
    'reset_tasks': {EN: 'Reset Tasks', ES: 'Restablecer Tareas', VI: 'Đặt Lại Công Việc'},
    'reset_to_default': {
        EN: 'Reset to Default Tasks',
        ES: 'Restablecer a Tareas Predeterminadas',
        VI: 'Đặt Lại Về Công Việc Mặc Định',
    },
    'reset_confirmation': {
        EN: 'Are you sure you want to reset all tasks to their default state? This action cannot be undone.',
        ES: '¿Está seguro de que desea restablecer todas las tareas a su estado predeterminado? '
            'Esta acción no se puede deshacer.',
        VI: 'Bạn có chắc muốn đặt lại tất cả công việc về trạng thái mặc định? Không thể hoàn tác thao tác này.',
    },
    'birthday': {EN: 'Birthday', ES: 'Fecha de Nacimiento', VI: 'Ngày Sinh'},
    'child_birth_date': {
        EN: "Child's Birth Date",
        ES: 'Fecha de Nacimiento del Niño',
        VI: 'Ngày Sinh Của Con',
    },
    'current_age': {EN: 'Current Age', ES: 'Edad Actual', VI: 'Tuổi Hiện Tại'},
    'years_old': {EN: '{age} years old', ES: '{age} años', VI: '{age} tuổi'},
    'language': {EN: 'Language', ES: 'Idioma', VI: 'Ngôn Ngữ'},
    # --- task detail ---
    'task_details': {EN: 'Task Details', ES: 'Detalles de la Tarea', VI: 'Chi Tiết Công Việc'},
    'age_range': {
        EN: 'Age Range: {start}-{end}',
        ES: 'Rango de Edad: {start}-{end}',
        VI: 'Độ Tuổi: {start}-{end}',
    },
    'status': {EN: 'Status', ES: 'Estado', VI: 'Trạng Thái'},
    'notes': {EN: 'Notes', ES: 'Notas', VI: 'Ghi Chú'},
    'work_in_progress': {EN: 'Working on it', ES: 'Trabajando en ello', VI: 'Đang làm'},
    'yes': {EN: 'Yes', ES: 'Sí', VI: 'Có'},
    'no': {EN: 'No', ES: 'No', VI: 'Không'},
    # --- age bands ---
    'band_under_12': {EN: 'Under 12', ES: '< 12', VI: 'Dưới 12'},
    'band_12_16': {EN: '12 - 16', ES: '12 - 16', VI: '12 - 16'},
    'band_16_18': {EN: '16 - 18', ES: '16 - 18', VI: '16 - 18'},
    'band_18_22': {EN: '18 - 22', ES: '18 - 22', VI: '18 - 22'},
    'band_22_plus': {EN: '22+', ES: '22+', VI: '22+'},
    # --- categories ---
    'category_transition_planning': {
        EN: 'Transition Planning', ES: 'Planificación de Transición', VI: 'Lập Kế Hoạch Chuyển Tiếp'},
    'category_education_training': {
        EN: 'Education and Training', ES: 'Educación y Capacitación', VI: 'Giáo Dục và Đào Tạo'},
    'category_adult_life': {EN: 'Adult Life', ES: 'Vida Adulta', VI: 'Cuộc Sống Trưởng Thành'},
    'category_self_advocacy': {EN: 'Self-Advocacy', ES: 'Auto-Defensa', VI: 'Tự Bênh Vực'},
    'category_work_preparation': {
        EN: 'Work Preparation', ES: 'Preparación para el Trabajo', VI: 'Chuẩn Bị Việc Làm'},
    # --- statuses ---
    'status_not_started': {EN: 'Not Started', ES: 'No Iniciado', VI: 'Chưa Bắt Đầu'},
    'status_in_progress': {EN: 'In Progress', ES: 'En Progreso', VI: 'Đang Thực Hiện'},
    'status_completed': {EN: 'Completed', ES: 'Completado', VI: 'Hoàn Thành'},
    # --- command loop ---
    'help_title': {EN: 'Commands:', ES: 'Comandos:', VI: 'Các lệnh:'},
    'help_show': {
        EN: 'Task details and notes',
        ES: 'Detalles y notas de la tarea',
        VI: 'Chi tiết và ghi chú công việc',
    },
    'help_status': {
        EN: 'Set status; s: ns (not started), ip (in progress), c (completed)',
        ES: 'Cambiar estado; s: ns (no iniciado), ip (en progreso), c (completado)',
        VI: 'Đặt trạng thái; s: ns (chưa bắt đầu), ip (đang thực hiện), c (hoàn thành)',
    },
    'help_done': {
        EN: 'Toggle completed / not started',
        ES: 'Alternar completado / no iniciado',
        VI: 'Chuyển đổi hoàn thành / chưa bắt đầu',
    },
    'help_start': {
        EN: 'Toggle in progress / not started',
        ES: 'Alternar en progreso / no iniciado',
        VI: 'Chuyển đổi đang thực hiện / chưa bắt đầu',
    },
    'help_wip': {
        EN: "Set or toggle the 'working on it' marker",
        ES: "Activar o alternar la marca 'trabajando en ello'",
        VI: "Bật hoặc chuyển đổi dấu 'đang làm'",
    },
    'help_note': {
        EN: 'Replace notes (no text clears them)',
        ES: 'Reemplazar notas (sin texto las borra)',
        VI: 'Thay ghi chú (không có nội dung sẽ xóa)',
    },
    'help_birthday': {
        EN: "Set the child's birth date",
        ES: 'Establecer la fecha de nacimiento del niño',
        VI: 'Đặt ngày sinh của con',
    },
    'help_lang': {EN: 'Switch language', ES: 'Cambiar idioma', VI: 'Đổi ngôn ngữ'},
    'help_reset': {
        EN: 'Reset all tasks to defaults (asks first)',
        ES: 'Restablecer todas las tareas (pregunta antes)',
        VI: 'Đặt lại tất cả công việc (hỏi trước)',
    },
    'help_help': {
        EN: 'Show this help (press Enter to return)',
        ES: 'Mostrar esta ayuda (Enter para volver)',
        VI: 'Hiện trợ giúp này (nhấn Enter để quay lại)',
    },
    'help_exit': {EN: 'Exit', ES: 'Salir', VI: 'Thoát'},
    'usage': {EN: 'Usage: {usage}', ES: 'Uso: {usage}', VI: 'Cách dùng: {usage}'},
    'unknown_command': {
        EN: "Unknown command. Type 'help' for instructions.",
        ES: "Comando desconocido. Escriba 'help' para ver las instrucciones.",
        VI: "Lệnh không hợp lệ. Gõ 'help' để xem hướng dẫn.",
    },
    'no_task': {EN: 'No task #{number}.', ES: 'No existe la tarea #{number}.', VI: 'Không có công việc #{number}.'},
    'invalid_status': {EN: 'Invalid status.', ES: 'Estado no válido.', VI: 'Trạng thái không hợp lệ.'},
    'invalid_date': {
        EN: 'Invalid date; use YYYY-MM-DD.',
        ES: 'Fecha no válida; use AAAA-MM-DD.',
        VI: 'Ngày không hợp lệ; dùng YYYY-MM-DD.',
    },
    'future_birthdate': {
        EN: 'The birth date cannot be in the future.',
        ES: 'La fecha de nacimiento no puede ser futura.',
        VI: 'Ngày sinh không thể ở tương lai.',
    },
    'unknown_language': {
        EN: 'Unknown language: {name}. Use en, es or vi.',
        ES: 'Idioma desconocido: {name}. Use en, es o vi.',
        VI: 'Ngôn ngữ không xác định: {name}. Dùng en, es hoặc vi.',
    },
    'goodbye': {EN: 'Goodbye.', ES: 'Adiós.', VI: 'Tạm biệt.'},
    'interrupted': {EN: 'Interrupted. Goodbye.', ES: 'Interrumpido. Adiós.', VI: 'Đã ngắt. Tạm biệt.'},
    # --- language names (shown in their own language) ---
    'language_en': {EN: 'English', ES: 'English', VI: 'English'},
    'language_es': {EN: 'Español', ES: 'Español', VI: 'Español'},
    'language_vi': {EN: 'Tiếng Việt', ES: 'Tiếng Việt', VI: 'Tiếng Việt'},
}


def find_key(text: str) -> Optional[str]:
    """Map a canonical key or any known title variant back to the key."""
    if not text:
        return None
    return _TITLE_INDEX.get(text.strip())


def resolve(key_or_variant: str, language: Language, description: str = '') -> TextPair:
    """Return (title, description) for a task in ``language``.

    Accepts the canonical key or a title in any of the supported languages.
    Unknown input is handed back unchanged; this never raises.
    """
    key = find_key(key_or_variant)
    if key is None:
        return key_or_variant, description
    row = TASK_TEXT[key]
    return row.get(language, row[EN])


def label(label_id: str, language: Language = EN, **params: object) -> str:
    """Look up a fixed UI label, optionally formatting ``{placeholders}``."""
    row = LABELS.get(label_id)
    if row is None:
        return label_id
    text = row.get(language) or row[EN]
    return text.format(**params) if params else text


def _label_suffix(value: str) -> str:
    return value.lower().replace(' and ', '_').replace('-', '_').replace(' ', '_')


def category_name(category: Category, language: Language = EN) -> str:
    return label(f'category_{_label_suffix(category.value)}', language)


def status_name(status: TaskStatus, language: Language = EN) -> str:
    return label(f'status_{_label_suffix(status.value)}', language)
