"""Static lookup tables for resume parsing.

Everything here is read-only module state; callers must not mutate it.
"""

from __future__ import annotations

from types import MappingProxyType

SKILLS_VOCABULARY: tuple[str, ...] = (
    # Programming languages
    "JavaScript",
    "Python",
    "Java",
    "C++",
    "C#",
    "PHP",
    "Ruby",
    "Go",
    "Rust",
    "Swift",
    "TypeScript",
    "Kotlin",
    "Scala",
    "R",
    "MATLAB",
    "Perl",
    "Shell",
    "Bash",
    # Web
    "HTML",
    "CSS",
    "React",
    "Angular",
    "Vue.js",
    "Node.js",
    "Express",
    "Django",
    "Flask",
    "Spring",
    "Laravel",
    "Rails",
    "ASP.NET",
    "jQuery",
    "Bootstrap",
    "Sass",
    "Less",
    "Webpack",
    "Gulp",
    "Grunt",
    # Databases
    "MySQL",
    "PostgreSQL",
    "MongoDB",
    "SQLite",
    "Oracle",
    "SQL Server",
    "Redis",
    "Elasticsearch",
    "Cassandra",
    "DynamoDB",
    "Firebase",
    # Cloud & DevOps
    "AWS",
    "Azure",
    "Google Cloud",
    "Docker",
    "Kubernetes",
    "Jenkins",
    "CI/CD",
    "Terraform",
    "Ansible",
    "Chef",
    "Puppet",
    "Vagrant",
    "Git",
    "SVN",
    # Data science & ML
    "Machine Learning",
    "Deep Learning",
    "TensorFlow",
    "PyTorch",
    "Scikit-learn",
    "Pandas",
    "NumPy",
    "Matplotlib",
    "Seaborn",
    "Jupyter",
    "Apache Spark",
    # Mobile
    "iOS",
    "Android",
    "React Native",
    "Flutter",
    "Xamarin",
    "Ionic",
    # Other
    "REST API",
    "GraphQL",
    "Microservices",
    "SOAP",
    "JSON",
    "XML",
    "YAML",
    "Apache",
    "Nginx",
    "Linux",
    "Windows",
    "macOS",
    "Agile",
    "Scrum",
    "Kanban",
)

SKILL_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "js": "JavaScript",
        "ts": "TypeScript",
        "py": "Python",
        "reactjs": "React",
        "nodejs": "Node.js",
        "vuejs": "Vue.js",
        "angularjs": "Angular",
        "html5": "HTML",
        "css3": "CSS",
    }
)

EDUCATION_KEYWORDS: frozenset[str] = frozenset(
    {
        "bachelor",
        "master",
        "phd",
        "doctorate",
        "degree",
        "university",
        "college",
        "institute",
        "school",
        "education",
        "graduated",
        "gpa",
        "cgpa",
        "honors",
        "magna cum laude",
        "summa cum laude",
        "cum laude",
        "diploma",
        "certificate",
    }
)

EXPERIENCE_KEYWORDS: frozenset[str] = frozenset(
    {
        "experience",
        "work",
        "employment",
        "job",
        "position",
        "role",
        "worked",
        "developed",
        "managed",
        "led",
        "created",
        "designed",
        "implemented",
        "maintained",
        "optimized",
        "improved",
        "achieved",
        "responsible",
        "years",
        "months",
        "intern",
        "internship",
        "freelance",
        "consultant",
    }
)

# Generic vocabulary that header patterns drag in as false-positive skills.
CANDIDATE_STOPLIST: frozenset[str] = EDUCATION_KEYWORDS | EXPERIENCE_KEYWORDS

MAJOR_SECTIONS: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "awards",
    "publications",
    "references",
    "interests",
    "hobbies",
)

EXPERIENCE_SECTION_KEYWORDS: tuple[str, ...] = (
    "experience",
    "work experience",
    "employment",
    "professional experience",
    "work history",
    "career",
)

EDUCATION_SECTION_KEYWORDS: tuple[str, ...] = (
    "education",
    "academic",
    "qualification",
    "degree",
    "university",
    "college",
)

SUMMARY_SECTION_KEYWORDS: tuple[str, ...] = (
    "summary",
    "objective",
    "profile",
    "about",
    "overview",
    "introduction",
)

PROJECT_SECTION_KEYWORDS: tuple[str, ...] = (
    "projects",
    "personal projects",
    "side projects",
    "portfolio",
)
