"""
Layout of the two-page employment application form (F-HRM-01-05)

Every position here is a literal in points, measured from the top-left
corner of an A4 page. The layout is data: field descriptors and static
draw operations that `build_form` turns into a flat list of primitives per
page. Nothing in this module knows about the PDF backend.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from hrapply.models.record import blank

PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89
MARGIN = 30
CONTENT_WIDTH = PAGE_WIDTH - MARGIN * 2

FORM_CODE = "F-HRM-01-05 Rev :02 01/01/67"
PAGE_COUNT = 2

CHECKBOX_SIZE = 6
CHECK_MARK_OFFSET = (1, -1)
ELLIPSIS = ".."

Record = Dict[str, Any]


# ---------------------------------------------------------------------------
# Draw primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text:
    text: str
    x: float
    y: float
    size: float
    width: Optional[float] = None
    align: str = "left"


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Checkbox:
    x: float
    y: float
    checked: bool = False


@dataclass(frozen=True)
class Image:
    path: str
    x: float
    y: float
    width: float


Primitive = Union[Text, Box, Line, Checkbox, Image]


@dataclass
class Page:
    number: int
    items: List[Primitive] = field(default_factory=list)

    def texts(self) -> List[Text]:
        return [item for item in self.items if isinstance(item, Text)]

    def checkboxes(self) -> List[Checkbox]:
        return [item for item in self.items if isinstance(item, Checkbox)]


# ---------------------------------------------------------------------------
# Field descriptors
# ---------------------------------------------------------------------------

def truncate(value: Any, max_len: int) -> str:
    """Cut a value to max_len characters and mark the cut with '..'"""
    text = blank(value)
    if len(text) > max_len:
        return text[:max_len] + ELLIPSIS
    return text


@dataclass(frozen=True)
class FieldSpec:
    """A labelled value drawn on one line: template.format(formatter(record[source]))"""
    template: str
    x: float
    dy: float
    width: float
    source: Optional[str] = None
    formatter: Callable[[Any], str] = blank

    def render(self, record: Record) -> str:
        if self.source is None:
            return self.template
        return self.template.format(self.formatter(record.get(self.source)))


@dataclass(frozen=True)
class Column:
    width: float
    headers: Tuple[str, ...]
    header_pad: float = 3
    cell_pad: float = 3
    max_chars: Optional[int] = None


@dataclass(frozen=True)
class TableSpec:
    """Ruled table: outer box, column rules, header cells and data rows"""
    columns: Tuple[Column, ...]
    height: float
    header_size: float
    header_line_gap: float
    row_rules: Tuple[float, ...]
    first_row_dy: float
    row_step: float
    cell_size: float


@dataclass(frozen=True)
class CheckLine:
    """Checkbox at the left edge followed by a label"""
    dy: float
    flag: str
    label: FieldSpec


@dataclass(frozen=True)
class Question:
    text: str
    text_th: str
    source: str


def draw_fields(fields: Sequence[FieldSpec], record: Record, origin_x: float, origin_y: float,
                size: float) -> List[Text]:
    """Generic draw loop over field descriptors"""
    return [
        Text(spec.render(record), origin_x + spec.x, origin_y + spec.dy, size, width=spec.width)
        for spec in fields
    ]


def draw_table_frame(table: TableSpec, x: float, y: float) -> List[Primitive]:
    """Outer box, vertical column rules, horizontal row rules and header labels"""
    items: List[Primitive] = [Box(x, y, CONTENT_WIDTH, table.height)]
    col_x = x
    for index, column in enumerate(table.columns):
        if index:
            items.append(Line(col_x, y, col_x, y + table.height))
        for line_no, header in enumerate(column.headers):
            items.append(Text(
                header,
                col_x + column.header_pad,
                y + 2 + line_no * table.header_line_gap,
                table.header_size,
                width=column.width - column.header_pad * 2,
            ))
        col_x += column.width
    for rule in table.row_rules:
        items.append(Line(x, y + rule, x + CONTENT_WIDTH, y + rule))
    return items


def draw_table_row(table: TableSpec, values: Sequence[Any], x: float, row_y: float) -> List[Text]:
    """One data row; empty cells are not drawn"""
    items = []
    col_x = x
    for column, value in zip(table.columns, values):
        text = truncate(value, column.max_chars) if column.max_chars else blank(value)
        if text:
            items.append(Text(text, col_x + column.cell_pad, row_y, table.cell_size,
                              width=column.width - column.cell_pad * 2))
        col_x += column.width
    return items


def section_title(title: str, y: float) -> Text:
    return Text(title, MARGIN, y, 9.5, width=CONTENT_WIDTH, align="center")


def checkbox(x: float, y: float, checked: Any) -> Checkbox:
    return Checkbox(x, y, bool(checked))


def footer(page_number: int) -> List[Text]:
    return [
        Text(f"{page_number} / {PAGE_COUNT}", 0, PAGE_HEIGHT - 25, 7.5, width=PAGE_WIDTH, align="center"),
        Text(FORM_CODE, PAGE_WIDTH - MARGIN - 100, PAGE_HEIGHT - 25, 7.5),
    ]


# ---------------------------------------------------------------------------
# Page 1
# ---------------------------------------------------------------------------

POSITION_FIELDS = (
    FieldSpec("(Please fill in English, if capable)", 5, 2, CONTENT_WIDTH - 10),
    FieldSpec("Position Applied ตำแหน่งที่สมัคร : {}", 5, 10, CONTENT_WIDTH - 10, "positionApplied"),
    FieldSpec("Expected Salary เงินเดือนที่คาดหวัง : {}", 5, 18, CONTENT_WIDTH - 10, "expectedSalary"),
)

PERSONAL_FIELDS = (
    FieldSpec("ชื่อ : (นาย/นางสาว/นาง) {}", 3, 0, 170, "firstNameTh"),
    FieldSpec("ชื่อเล่น {}", 180, 0, 130, "nickname"),
    FieldSpec("นามสกุล : {}", 320, 0, 215, "lastNameTh"),

    FieldSpec("Name : (Mr./Miss/Mrs.) {}", 3, 14, 310, "firstNameEn"),
    FieldSpec("Last Name : {}", 320, 14, 215, "lastNameEn"),

    FieldSpec("Present Address ที่อยู่ปัจจุบัน : {}", 3, 28, 240, "address"),
    FieldSpec("Moo หมู่ : {}", 250, 28, 85, "moo"),
    FieldSpec("District ตำบล : {}", 340, 28, 195, "subDistrict"),

    FieldSpec("District ซอย/ถ.แขวง : {}", 3, 42, 240, "district"),
    FieldSpec("Province จังหวัด : {}", 250, 42, 285, "province"),

    FieldSpec("Zip Code รหัสไปรษณีย์ : {}", 3, 56, 240, "zipCode"),
    FieldSpec("Mobile Phone โทรศัพท์มือถือ : {}", 250, 56, 285, "mobile"),

    FieldSpec("E mail อีเมล์: {}", 3, 70, 532, "email"),

    FieldSpec("Date of Birth ว/ด/ปี/ เกิด : {}", 3, 84, 240, "birthDate"),
    FieldSpec("Age อายุ : {}", 250, 84, 85, "age"),
    FieldSpec("Years ปี", 340, 84, 195),

    FieldSpec("Identification Card No. หมายเลขบัตรประจำตัวประชาชน : {}", 3, 98, 532, "idCard"),

    FieldSpec("Sex เพศ : {}", 3, 112, 110, "sex"),
    FieldSpec("Blood Type กรุ๊ปเลือด : {}", 120, 112, 195, "bloodType"),
    FieldSpec("Religion ศาสนา : {}", 320, 112, 215, "religion"),

    FieldSpec("Height ส่วนสูง : {}", 3, 126, 90, "height"),
    FieldSpec("cm. เซนติเมตร", 100, 126, 145),
    FieldSpec("Weight น้ำหนัก : {}", 250, 126, 105, "weight"),
    FieldSpec("kg. กิโลกรัม", 360, 126, 175),
)

FAMILY_TABLE = TableSpec(
    columns=(
        Column(120, ("Name ชื่อ",)),
        Column(120, ("Relationship ความสัมพันธ์",)),
        Column(60, ("Age อายุ",)),
        Column(135, ("Occupation อาชีพ",)),
    ),
    height=58,
    header_size=9,
    header_line_gap=0,
    row_rules=(12, 24, 36),
    first_row_dy=14,
    row_step=12,
    cell_size=9,
)

# Relation printed when a member is named without one
FAMILY_DEFAULT_RELATIONS = ("บิดา", "มารดา", "")
FAMILY_ROWS = 3

MARITAL_OPTIONS = (
    # value, checkbox x, label, label x, label width
    ("single", 140, "Single โสด", 150, 65),
    ("married", 220, "Married แต่งงาน", 230, 305),
)

MARITAL_FIELDS = (
    FieldSpec("Spouse's name ชื่อคู่สมรส : {}", 3, 20, 240, "spouseName"),
    FieldSpec("Occupation อาชีพ : {}", 250, 20, 285, "spouseOccupation"),
    FieldSpec("No. of Children จำนวนบุตร : {}", 3, 30, 532, "numberOfChildren"),
)

EMERGENCY_FIELDS = (
    FieldSpec("Name ชื่อ : {}", 3, 3, 240, "emergencyName"),
    FieldSpec("Relationship ความสัมพันธ์ : {}", 250, 3, 285, "emergencyRelation"),
    FieldSpec("Address ที่อยู่ : {}", 3, 31, 532, "emergencyAddress"),
    FieldSpec("Mobile Phone โทรศัพท์มือถือ : {}", 3, 59, 532, "emergencyPhone"),
)

EDUCATION_TABLE = TableSpec(
    columns=(
        Column(95, ("Degree", "ระดับการศึกษา")),
        Column(50, ("Year Graduated", "ปีที่จบ Year ปี"), header_pad=2),
        Column(175, ("Name of Institution", "ชื่อสถาบัน")),
        Column(75, ("Major", "วิชาเอก")),
        Column(40, ("GPA", "เกรดเฉลี่ย")),
    ),
    height=128,
    header_size=7.5,
    header_line_gap=6,
    row_rules=(15,),
    first_row_dy=17,
    row_step=11.5,
    cell_size=7.5,
)

# label, record prefix, has a major column
EDUCATION_LEVELS = (
    ("High School มัธยมศึกษา", "highSchool", False),
    ("Diploma อนุปริญญา", "diploma", True),
    ("Bachelor ปริญญาตรี", "bachelor", True),
    ("Master ปริญญาโท", "master", True),
    ("Others อื่นๆ", "other", True),
)


def _header(logo_path: Optional[str]) -> List[Primitive]:
    items: List[Primitive] = []
    if logo_path:
        items.append(Image(logo_path, MARGIN, MARGIN, 60))
    items += [
        Text("EMPLOYMENT APPLICATION", MARGIN + 80, MARGIN, 13.5, width=CONTENT_WIDTH - 160, align="center"),
        Text("ใบสมัครงาน", MARGIN + 80, MARGIN + 14, 11.5, width=CONTENT_WIDTH - 160, align="center"),
        # 3 cm x 3.4 cm photo
        Box(PAGE_WIDTH - MARGIN - 85, MARGIN, 85, 96),
        Text("รูปถ่าย 1 นิ้ว", PAGE_WIDTH - MARGIN - 83, MARGIN + 38, 7.5, width=81, align="center"),
    ]
    return items


def _family_rows(record: Record, table_y: float) -> List[Text]:
    items: List[Text] = []
    for index in range(FAMILY_ROWS):
        n = index + 1
        name = record.get(f"family{n}Name")
        if not name:
            continue
        relation = record.get(f"family{n}Relation") or FAMILY_DEFAULT_RELATIONS[index]
        values = (name, relation, record.get(f"family{n}Age"), record.get(f"family{n}Occupation"))
        row_y = table_y + FAMILY_TABLE.first_row_dy + FAMILY_TABLE.row_step * index
        items += draw_table_row(FAMILY_TABLE, values, MARGIN, row_y)
    return items


def _education_rows(record: Record, table_y: float) -> List[Text]:
    items: List[Text] = []
    row_y = table_y + EDUCATION_TABLE.first_row_dy
    for label, prefix, has_major in EDUCATION_LEVELS:
        values = (
            label,
            record.get(f"{prefix}Year"),
            record.get(f"{prefix}Name"),
            record.get(f"{prefix}Major") if has_major else "",
            record.get(f"{prefix}Gpa"),
        )
        items += draw_table_row(EDUCATION_TABLE, values, MARGIN, row_y)
        row_y += EDUCATION_TABLE.row_step
    return items


def build_page_one(record: Record, logo_path: Optional[str] = None) -> Page:
    page = Page(1)
    items = page.items
    items += _header(logo_path)

    # Position and salary
    y = MARGIN + 40
    items.append(Box(MARGIN, y, CONTENT_WIDTH, 28))
    items += draw_fields(POSITION_FIELDS, record, MARGIN, y, 9)

    # Staff only
    y += 32
    items.append(Box(MARGIN, y, CONTENT_WIDTH, 14))
    items.append(Text("Staff Only สำหรับเจ้าหน้าที่", MARGIN + 5, y + 3, 9))

    # Personal record
    y += 18
    items.append(section_title("PERSONAL RECORD ประวัติส่วนตัว", y))
    items.append(Text("(นักศึกษาฝึกงานกรอกเฉพาะหน้า 1)", PAGE_WIDTH - MARGIN - 100, y, 7.5))
    y += 12
    items.append(Box(MARGIN, y, CONTENT_WIDTH, 145))
    items += draw_fields(PERSONAL_FIELDS, record, MARGIN, y + 3, 9)

    # Family record
    y += 150
    items.append(section_title("FAMILY RECORD ประวัติครอบครัว", y))
    items.append(Text("(Particulard of your parents, brothers & sisters โปรดระบุชื่อบิดา มารดา)",
                      MARGIN, y + 10, 7.5, width=CONTENT_WIDTH, align="center"))
    y += 18
    items += draw_table_frame(FAMILY_TABLE, MARGIN, y)
    items += _family_rows(record, y)

    # Marital status
    y += 52
    items.append(Box(MARGIN, y, CONTENT_WIDTH, 60))
    items.append(Text("Marital Status สถานภาพสมรส", MARGIN + 3, y + 3, 9, width=130))
    marital_status = record.get("maritalStatus")
    for value, box_x, label, label_x, label_width in MARITAL_OPTIONS:
        items.append(checkbox(MARGIN + box_x, y + 3, marital_status == value))
        items.append(Text(label, MARGIN + label_x, y + 3, 9, width=label_width))
    items += draw_fields(MARITAL_FIELDS, record, MARGIN, y, 9)

    # Emergency contact
    y += 88
    items.append(section_title("EMERGENCY CONTACT บุคคลติดต่อในกรณีฉุกเฉิน", y))
    y += 10
    items.append(Box(MARGIN, y, CONTENT_WIDTH, 90))
    items += draw_fields(EMERGENCY_FIELDS, record, MARGIN, y, 9)

    # Educational record
    y += 95
    items.append(section_title("EDUCATIONAL RECORD ประวัติการศึกษา", y))
    y += 10
    items += draw_table_frame(EDUCATION_TABLE, MARGIN, y)
    items += _education_rows(record, y)

    items += footer(1)
    return page


# ---------------------------------------------------------------------------
# Page 2
# ---------------------------------------------------------------------------

LANGUAGE_HEADERS = (
    FieldSpec("Foreign Languages", 3, 2, 80),
    FieldSpec("Spoken พูด", 90, 2, 120),
    FieldSpec("Written เขียน", 220, 2, 120),
    FieldSpec("Understand เข้าใจ", 350, 2, 185),
)

# rating value, label, x offset within the group, label width
SPOKEN_WRITTEN_OPTIONS = (
    ("excellent", "Excellent", 0, 35),
    ("good", "Good", 50, 25),
    ("fair", "Fair", 90, 25),
)

UNDERSTAND_OPTIONS = (
    ("excellent", "Excellent", 0, 35),
    ("good", "Good", 50, 35),
    ("fair", "Fair", 100, 75),
)

# rating field, x of its first checkbox, options
LANGUAGE_RATINGS = (
    ("englishSpoken", 90, SPOKEN_WRITTEN_OPTIONS),
    ("englishWritten", 220, SPOKEN_WRITTEN_OPTIONS),
    ("englishUnderstand", 350, UNDERSTAND_OPTIONS),
)

SKILL_LINES = (
    CheckLine(28, "hasComputer", FieldSpec("Computer คอมพิวเตอร์", 12, 0, 523)),
    CheckLine(38.5, "hasDrivingCar",
              FieldSpec("Driving รถยนต์ : Driver Licence No. {}", 12, 0, 523, "carLicenseNo")),
    CheckLine(49, "hasDrivingMotor",
              FieldSpec("Driving รถจักรยานยนต์ : Driver Licence No. {}", 12, 0, 523, "motorLicenseNo")),
)

TRAINING_ROWS = 3
TRAINING_FIRST_DY = 3
TRAINING_STEP = 9

EMPLOYMENT_TABLE = TableSpec(
    columns=(
        Column(60, ("Period Time", "ระยะเวลา"), header_pad=2, cell_pad=2, max_chars=12),
        Column(110, ("List of Company", "ชื่อสถานประกอบการ"), header_pad=2, cell_pad=2, max_chars=20),
        Column(60, ("Position", "ตำแหน่ง"), header_pad=2, cell_pad=2, max_chars=12),
        Column(85, ("Responsibilities", "หน้าที่รับผิดชอบ"), header_pad=2, cell_pad=2, max_chars=18),
        Column(50, ("Salary", "เงินเดือน"), header_pad=2, cell_pad=2, max_chars=8),
        Column(80, ("Reason", "เหตุผลลาออก"), header_pad=2, cell_pad=2, max_chars=12),
    ),
    height=68,
    header_size=7.5,
    header_line_gap=6,
    row_rules=(15,),
    first_row_dy=17,
    row_step=14.5,
    cell_size=5.5,
)

EMPLOYMENT_ROWS = 3
EMPLOYMENT_FIELDS = ("Period", "Company", "Position", "Responsibilities", "Salary", "Reason")

QUESTIONS = (
    Question("1. Have you ever applied or worked with I C P Group before?",
             "ท่านเคยสมัครหรือทำงานในกลุ่มบริษัทในเครือ ไอ ซี พี มาก่อนหรือไม่?", "workedBefore"),
    Question("2. Do you have any relatives or friends working in I C P Group?",
             "ท่านมีญาติพี่น้องหรือคนรู้จักทำงานในกลุ่มบริษัทในเครือ ไอ ซี พี หรือไม่?", "hasRelatives"),
    Question("3. Have you ever been convicted for any crimes?",
             "ท่านเคยถูกตัดสินลงโทษหรือไม่?", "convicted"),
    Question("4. Have you ever been seriously ill within the past 5 years?",
             "ในระยะ 5 ปีที่ผ่านมา ท่านเคยป่วยเป็นโรคร้ายแรงหรือไม่?", "seriousIll"),
    Question("5. Do you have color blindness?",
             "ท่านมีภาวะตาบอดสีหรือไม่?", "colorBlind"),
    Question("6. Are you pregnant at the moment?",
             "ขณะนี้ท่านอยู่ในระหว่างการตั้งครรภ์หรือไม่?", "pregnant"),
    Question("7. Have you ever contracted with contagious disease?",
             "ท่านเคยป่วยเป็นโรคติดต่อร้ายแรงมาก่อนหรือไม่?", "contagious"),
)

DISCLAIMER = (
    # text, advance before the line
    ("I understand that any falsified statement on this application can be sufficient cause for "
     "dismissal if I am employed.", 0),
    ("ข้าพเจ้ายอมรับว่าข้อความใดๆเป็นความจริงทุกประการ การปิดบังความจริงใดๆ "
     "จะทำให้ข้าพเจ้าหมดสิทธิ์ในการได้รับการพิจารณาว่าจ้างงาน", 9.5),
    ("หรืออาจถูกปลดออกจากงานในกรณีที่บริษัทฯ ได้ว่าจ้างข้าพเจ้าแล้ว", 6.5),
)


def _language_grid(record: Record, y: float) -> List[Primitive]:
    items: List[Primitive] = list(draw_fields(LANGUAGE_HEADERS, record, MARGIN, y, 7.5))
    row_y = y + 12
    items.append(Text("ภาษาอังกฤษ (English)", MARGIN + 3, row_y, 7.5, width=80))
    for source, group_x, options in LANGUAGE_RATINGS:
        rating = record.get(source)
        for value, label, offset, label_width in options:
            items.append(checkbox(MARGIN + group_x + offset, row_y, rating == value))
            items.append(Text(label, MARGIN + group_x + offset + 10, row_y, 7.5, width=label_width))
    for line in SKILL_LINES:
        items.append(checkbox(MARGIN + 3, y + line.dy, record.get(line.flag)))
        items.append(Text(line.label.render(record), MARGIN + line.label.x, y + line.dy, 7.5,
                          width=line.label.width))
    return items


def _training_lines(record: Record, y: float) -> List[Text]:
    items: List[Text] = []
    for index in range(TRAINING_ROWS):
        n = index + 1
        course = record.get(f"training{n}Course")
        if not course:
            continue
        institution = blank(record.get(f"training{n}Institution"))
        year = blank(record.get(f"training{n}Year"))
        items.append(Text(f"{course} - {institution} ({year})", MARGIN + 3,
                          y + TRAINING_FIRST_DY + TRAINING_STEP * index, 7.5, width=CONTENT_WIDTH - 6))
    return items


def _employment_rows(record: Record, table_y: float) -> List[Text]:
    items: List[Text] = []
    for index in range(EMPLOYMENT_ROWS):
        n = index + 1
        if not record.get(f"work{n}Company"):
            continue
        values = [record.get(f"work{n}{name}") for name in EMPLOYMENT_FIELDS]
        row_y = table_y + EMPLOYMENT_TABLE.first_row_dy + EMPLOYMENT_TABLE.row_step * index
        items += draw_table_row(EMPLOYMENT_TABLE, values, MARGIN, row_y)
    return items


def _questions(record: Record, y: float) -> Tuple[List[Primitive], float]:
    items: List[Primitive] = []
    for question in QUESTIONS:
        answer = record.get(question.source)
        items += [
            Text(question.text, MARGIN + 3, y, 6.5, width=PAGE_WIDTH - MARGIN - 70),
            checkbox(PAGE_WIDTH - MARGIN - 60, y, answer == "yes"),
            Text("Yes", PAGE_WIDTH - MARGIN - 52, y, 6.5, width=20),
            checkbox(PAGE_WIDTH - MARGIN - 30, y, answer == "no"),
            Text("No", PAGE_WIDTH - MARGIN - 22, y, 6.5, width=22),
        ]
        y += 9.5
        items.append(Text(question.text_th, MARGIN + 3, y, 6.5, width=CONTENT_WIDTH))
        y += 10.5
    return items, y


def build_page_two(record: Record) -> Page:
    page = Page(2)
    items = page.items

    # Special skill
    y = MARGIN
    items.append(section_title("SPECIAL SKILL ความสามารถพิเศษ", y))
    y += 10
    items.append(Box(MARGIN, y, CONTENT_WIDTH, 68))
    items += _language_grid(record, y)

    # Professional training
    y += 70
    items.append(section_title("PROFESSIONAL TRAINING ประวัติการฝึกอบรม", y))
    items.append(Text("(Curriculums หลักสูตร)", MARGIN, y + 9, 7.5, width=CONTENT_WIDTH, align="center"))
    y += 18
    items.append(Box(MARGIN, y, CONTENT_WIDTH, 45))
    items += _training_lines(record, y)

    # Employment record
    y += 40
    items.append(section_title("EMPLOYMENT RECORD ประวัติการทำงาน", y))
    y += 10
    items += draw_table_frame(EMPLOYMENT_TABLE, MARGIN, y)
    items += _employment_rows(record, y)

    # Other
    y += 70
    items.append(section_title("OTHER ข้อมูลด้านอื่น ๆ", y))
    y += 10
    question_items, y = _questions(record, y)
    items += question_items

    y += 3
    for text, advance in DISCLAIMER:
        y += advance
        items.append(Text(text, MARGIN, y, 6.5, width=CONTENT_WIDTH))

    # Signature
    y += 15
    items.append(Text("Signature ลายมือชื่อผู้สมัคร", MARGIN + 80, y, 7.5, width=200))
    items.append(Text(f"Date วัน เดือน ปี {blank(record.get('signatureDate'))}",
                      PAGE_WIDTH - MARGIN - 120, y, 7.5, width=120))

    items += footer(2)
    return page


def build_form(record: Optional[Record], logo_path: Optional[str] = None) -> List[Page]:
    """
    Lay out both pages of the form for a (possibly partial) record

    Args:
        record: Application Record; missing fields print as blanks
        logo_path: Logo image to place in the header, if one exists

    Returns:
        List[Page]: Pages in print order
    """
    record = record or {}
    return [build_page_one(record, logo_path), build_page_two(record)]
