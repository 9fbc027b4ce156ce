# Insights Prompts

from typing import Sequence

from pomorise.models.insights import HabitRecord, TaskRecord


INSIGHTS_SYSTEM_PROMPT = """You are a productivity expert and a friendly coach.

You will receive a short summary of a user's habits and pomodoro tasks.

Rules:
- Only refer to habits and tasks that appear in the summary
- Use simple sentences without complex words
- Do NOT invent numbers
- Do NOT ask questions

Output MUST be a single JSON object with this exact structure:

{
  "insights": {
    "story": "<three or four sentences>",
    "tips": ["<tip>", "<tip>", "<tip>"],
    "feedback": "<one sentence>",
    "areasToImprove": ["<area>", "<area>"]
  }
}"""


def format_habit_line(habit: HabitRecord) -> str:
    return f"- {habit.name}: {habit.description} (Streak: {habit.currentStreak}/{habit.targetDays})"


def format_task_line(task: TaskRecord) -> str:
    notes = task.notes or "No notes"
    return f"- {task.title}: {notes} (Progress: {task.completedPomodoros}/{task.estimatedPomodoros})"


def build_insights_prompt(
    habits: Sequence[HabitRecord],
    tasks: Sequence[TaskRecord],
) -> str:
    """
    Build the user prompt for insights generation.

    Args:
        habits: Habits to summarize (may be empty)
        tasks: Tasks to summarize (may be empty)

    Returns:
        Prompt listing the user's data and the requested JSON shape
    """
    if habits:
        habits_block = "Habits:\n" + "\n".join(format_habit_line(h) for h in habits)
    else:
        habits_block = "No habits provided."

    if tasks:
        tasks_block = "Tasks:\n" + "\n".join(format_task_line(t) for t in tasks)
    else:
        tasks_block = "No tasks provided."

    return f"""Based on the user's habits and tasks, generate insights with:

- A short and simple motivational story (three or four sentences) inspired by real-world examples.
- Three clear and actionable tips in simple language.
- Concise feedback (one sentence) that is easy to understand.
- Two areas to improve, written in simple and direct sentences.

User Data:
{habits_block}
{tasks_block}

Keep all responses short, clear, and easy to understand. Return JSON under the "insights" key."""
