# echoverse/generate/prompts.py
# Reusable system prompts for each Echoverse tool.

from typing import Any, Optional

ECHO_ASSISTANT = """\
You are Echo, the helpful AI assistant for Echoverse platform. \
Echoverse is a comprehensive SaaS platform with AI tools like EchoWriter, EchoBuilder, \
EchoSeller, EchoMarketer, EchoTeacher, and EchoDevBot. \
Your goal is to help users understand and use these tools, provide assistance, \
and answer questions about Echoverse features. \
Keep responses helpful, friendly, and concise."""

EDUCATIONAL_TASKS = {
    "lesson": "Create a detailed lesson plan with learning objectives, activities, and assessment strategies.",
    "quiz": "Generate a comprehensive quiz with varied question types and correct answers.",
    "interactive": "Design interactive learning activities that engage students actively in the learning process.",
    "curriculum": "Develop a structured curriculum outline with clear progression and learning outcomes.",
}

MARKETING_TASKS = {
    "email": "Write an email sequence with subject lines and a clear call to action.",
    "social": "Write social media posts tailored to each platform's format.",
    "ad": "Write concise, high-converting ad copy with headline variants.",
    "campaign": "Outline a marketing campaign with audience, channels, timeline, and key messages.",
}

DEV_TASKS = {
    "code": "Write code to solve this problem.",
    "debug": "Help debug this code.",
    "architecture": "Design an architecture for this system.",
}


def chat_system_prompt(username: Optional[str] = None) -> str:
    if username:
        return f"{ECHO_ASSISTANT} The user's name is {username}."
    return ECHO_ASSISTANT


def content_system_prompt(kind: Optional[str], tone: Optional[str] = None, context: str = "") -> str:
    subject = kind or "content"
    prompt = f"You are an expert {subject} creator. Create high-quality, engaging {subject} based on the user's request."
    if tone:
        prompt += f" Use a {tone} tone."
    if context:
        prompt += f" {context}"
    return prompt


def educational_system_prompt(kind: str, subject: Optional[str] = None) -> str:
    prompt = "You are an expert educator. " + EDUCATIONAL_TASKS.get(kind, "")
    if subject:
        prompt += f" This content is for the subject: {subject}."
    return prompt.strip()


def marketing_system_prompt(kind: str) -> str:
    return ("You are an expert marketer. " + MARKETING_TASKS.get(kind, "")).strip()


def website_system_prompt(site_type: Optional[str]) -> str:
    return (
        f"You are an expert web developer. Build a complete, responsive {site_type or 'business'} website "
        "as a single HTML document with embedded CSS. Return only the HTML."
    )


def dev_system_prompt(kind: str, language: Optional[str] = None) -> str:
    who = f"You are an expert {language} developer." if language else "You are an expert developer."
    return f"{who} {DEV_TASKS.get(kind, DEV_TASKS['architecture'])}"


def analysis_system_prompt(analysis_type: str) -> str:
    return (
        f"You are an expert text analyst. Perform a {analysis_type} analysis on the provided text "
        "and return your insights as a JSON object."
    )


def lesson_prompt(
    topic: str, grade_level: Any, duration: Any, learning_style: Optional[str] = None, context: str = ""
) -> str:
    prompt = (
        f"You are an expert educator. Generate a lesson plan for {topic} appropriate for "
        f"grade {grade_level}, duration {duration} minutes."
    )
    if learning_style:
        prompt += f" Suit it to {learning_style} learners."
    if context:
        prompt += f" {context}"
    return prompt


def quiz_prompt(topic: str, difficulty: Any, question_count: Any) -> str:
    return (
        f"Create a {difficulty} level quiz about {topic} with {question_count} questions. "
        "Include multiple choice and open-ended questions."
    )
