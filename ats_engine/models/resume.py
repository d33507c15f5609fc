"""Resume document models matching the editor's payload structure."""
from typing import Annotated, List, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, field_validator


# Section ids in the order the editor lays out a fresh document
DEFAULT_SECTION_ORDER = (
    "header",
    "summary",
    "experience",
    "skills",
    "education",
    "projects",
    "certifications",
    "languages",
)


def _none_to_empty(v):
    return "" if v is None else v


def _drop_blank(v):
    """Coerce None to an empty list and filter out blank strings."""
    if v is None:
        return []
    if isinstance(v, list):
        return [item for item in v if item and str(item).strip()]
    return v


# Editor payloads send null for untouched fields
Text = Annotated[str, BeforeValidator(_none_to_empty)]


class _DocumentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PersonalInfo(_DocumentModel):
    """Header block of the resume."""
    name: Text = Field("", description="Full name")
    title: Text = Field("", description="Professional title/headline")
    email: Text = Field("", description="Email address")
    phone: Text = Field("", description="Phone number")
    location: Text = Field("", description="Location (City, State/Country)")
    linkedin: Text = Field("", description="LinkedIn profile URL or username")
    website: Text = Field("", description="Personal website URL")
    github: Text = Field("", description="GitHub username or URL")
    photo: Text = Field("", description="Photo URL, never scored")

    def has_link(self) -> bool:
        return any(link.strip() for link in (self.linkedin, self.website, self.github))


class ExperienceEntry(_DocumentModel):
    """Work experience entry."""
    id: Text = ""
    company: Text = ""
    position: Text = ""
    location: Text = ""
    start_date: Text = Field("", alias="startDate")
    end_date: Text = Field("", alias="endDate")
    current: bool = False
    bullets: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("bullets", "description"),
        serialization_alias="bullets",
        description="Achievement bullet points",
    )

    @field_validator("bullets", mode="before")
    @classmethod
    def filter_empty_bullets(cls, v):
        """Filter out empty strings from the bullet list."""
        return _drop_blank(v)

    @field_validator("current", mode="before")
    @classmethod
    def coerce_current(cls, v):
        return bool(v)


class EducationEntry(_DocumentModel):
    """Education entry."""
    id: Text = ""
    school: Text = Field(
        "",
        validation_alias=AliasChoices("school", "institution"),
        serialization_alias="school",
    )
    degree: Text = ""
    field: Text = ""
    location: Text = ""
    start_date: Text = Field("", alias="startDate")
    end_date: Text = Field("", alias="endDate")
    gpa: Text = ""

    def has_year(self) -> bool:
        return bool(self.start_date.strip() or self.end_date.strip())


class SkillGroup(_DocumentModel):
    """Skills category."""
    category: Text = ""
    items: List[str] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def filter_empty_items(cls, v):
        """Filter out empty strings from items list."""
        return _drop_blank(v)


class Certification(_DocumentModel):
    id: Text = ""
    name: Text = ""
    issuer: Text = ""
    date: Text = ""


class LanguageEntry(_DocumentModel):
    language: Text = ""
    proficiency: Text = ""


class ProjectEntry(_DocumentModel):
    id: Text = ""
    name: Text = ""
    description: Text = ""
    technologies: List[str] = Field(default_factory=list)
    link: Text = ""

    @field_validator("technologies", mode="before")
    @classmethod
    def filter_empty_technologies(cls, v):
        return _drop_blank(v)


class ResumeDocument(_DocumentModel):
    """Immutable snapshot of a resume as supplied by the editing surface.

    Every field has a default so that sparse or partially-filled payloads
    validate; absent sections simply score as empty.
    """
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    summary: Text = Field("", description="Professional summary")
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillGroup] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    section_order: Optional[List[str]] = Field(
        None,
        alias="sectionOrder",
        description="Order in which sections are rendered",
    )

    @field_validator("personal_info", mode="before")
    @classmethod
    def default_personal_info(cls, v):
        return {} if v is None else v

    @field_validator(
        "experience", "education", "skills", "certifications", "languages", "projects",
        mode="before",
    )
    @classmethod
    def coerce_sections(cls, v):
        return [] if v is None else v

    def ordered_sections(self) -> tuple[str, ...]:
        """Section ids in document order."""
        if self.section_order:
            return tuple(s.strip().lower() for s in self.section_order)
        return DEFAULT_SECTION_ORDER

    def all_bullets(self) -> list[str]:
        return [bullet for entry in self.experience for bullet in entry.bullets]

    def skill_terms(self) -> list[str]:
        """Distinct skill terms across all categories, first spelling kept."""
        seen: set[str] = set()
        terms = []
        for group in self.skills:
            for item in group.items:
                key = item.strip().lower()
                if key not in seen:
                    seen.add(key)
                    terms.append(item.strip())
        return terms

    def resume_text(self) -> str:
        """Concatenate all text from the resume for keyword analysis."""
        parts = []

        info = self.personal_info
        parts.extend([info.name, info.title, info.location])

        parts.append(self.summary)

        for exp in self.experience:
            parts.extend([exp.company, exp.position, exp.location])
            parts.extend(exp.bullets)

        for edu in self.education:
            parts.extend([edu.school, edu.degree, edu.field])

        for group in self.skills:
            parts.append(group.category)
            parts.extend(group.items)

        for cert in self.certifications:
            parts.extend([cert.name, cert.issuer])

        for proj in self.projects:
            parts.extend([proj.name, proj.description])
            parts.extend(proj.technologies)

        for lang in self.languages:
            parts.append(lang.language)

        return "\n".join(p for p in parts if p)
