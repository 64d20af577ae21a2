"""Career questionnaire: 8 questions, each option adding weight to one or more streams."""

from pydantic import BaseModel, ConfigDict, Field

from grading_engine.core.schemas import StreamScores


class QuestionOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    stream_weights: StreamScores = Field(default_factory=StreamScores)


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    question: str
    options: tuple[QuestionOption, ...]


def _option(text: str, **weights: int) -> QuestionOption:
    return QuestionOption(text=text, stream_weights=StreamScores(**weights))


CAREER_QUESTIONNAIRE: tuple[Question, ...] = (
    Question(
        id=1,
        question="What type of data work excites you the most?",
        options=(
            _option("Analyzing data to find insights and patterns", bi_reporting=3, ai_ml=1),
            _option("Building systems that process and move data", data_engineering=3, ai_ml=1),
            _option("Creating predictive models and algorithms", ai_ml=3, data_engineering=1),
            _option("Creating visualizations and dashboards", bi_reporting=3, entry_level=1),
        ),
    ),
    Question(
        id=2,
        question="How do you prefer to solve problems?",
        options=(
            _option("Breaking down into smaller technical components",
                    data_engineering=2, ai_ml=2),
            _option("Understanding business context first", bi_reporting=3, entry_level=1),
            _option("Experimenting with different approaches", ai_ml=3, data_engineering=1),
            _option("Following established best practices", entry_level=2, bi_reporting=2),
        ),
    ),
    Question(
        id=3,
        question="Which tools/technologies interest you most?",
        options=(
            _option("SQL, dbt, and data warehousing tools", data_engineering=2, bi_reporting=2),
            _option("Python, TensorFlow, PyTorch", ai_ml=4),
            _option("Power BI, Tableau, Excel", bi_reporting=3, entry_level=1),
            _option("Cloud platforms (AWS, GCP, Azure)", data_engineering=3, ai_ml=1),
        ),
    ),
    Question(
        id=4,
        question="What's your preferred work style?",
        options=(
            _option("Deep technical work with minimal meetings", data_engineering=2, ai_ml=2),
            _option("Collaborating closely with business teams", bi_reporting=3, entry_level=1),
            _option("Research and experimentation focused", ai_ml=4),
            _option("Structured work with clear deliverables", entry_level=2, bi_reporting=2),
        ),
    ),
    Question(
        id=5,
        question="What outcome do you find most satisfying?",
        options=(
            _option("Seeing a dashboard drive business decisions", bi_reporting=4),
            _option("Building a reliable data pipeline that runs 24/7", data_engineering=4),
            _option("Training a model that makes accurate predictions", ai_ml=4),
            _option("Delivering clean, validated data to stakeholders",
                    entry_level=2, bi_reporting=2),
        ),
    ),
    Question(
        id=6,
        question="What drives your learning and professional growth?",
        options=(
            _option("Curiosity about how things work under the hood",
                    data_engineering=3, ai_ml=1),
            _option("Desire to make measurable business impact", bi_reporting=3, entry_level=1),
            _option("Mastering complex algorithms and math", ai_ml=4),
            _option("Building expertise in industry best practices",
                    entry_level=2, bi_reporting=2),
        ),
    ),
    Question(
        id=7,
        question="Which work environment energizes you most?",
        options=(
            _option("Fast-paced startup with lots of ownership", data_engineering=2, ai_ml=2),
            _option("Established company with structured growth", entry_level=2, bi_reporting=2),
            _option("Research-oriented with cutting-edge tech", ai_ml=4),
            _option("Consulting/agency with diverse projects", bi_reporting=2, entry_level=2),
        ),
    ),
    Question(
        id=8,
        question="How do you approach complex problems?",
        options=(
            _option("Analytically - gather data, test hypotheses", ai_ml=2, bi_reporting=2),
            _option("Systematically - design solution architecture first", data_engineering=4),
            _option("User-centric - focus on end-user needs", bi_reporting=3, entry_level=1),
            _option("Collaboratively - discuss with team members", entry_level=2, bi_reporting=2),
        ),
    ),
)

QUESTIONS_BY_ID: dict[int, Question] = {q.id: q for q in CAREER_QUESTIONNAIRE}
