"""FastAPI server exposing practice questions and session statistics."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, StrictInt
import uvicorn

from kana_practice.constants.about import APP_NAME, APP_VERSION
from kana_practice.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from kana_practice.core.markdown_renderer import renderer
from kana_practice.core.models import Sentinel
from kana_practice.core.practice_manager import AnswerOutcome, PracticeManager
from kana_practice.core.stats_formatter import build_dashboard

logger = logging.getLogger(__name__)

_PRACTICE_PAGE_HTML = """<!doctype html>
<html lang="ja">
  <head>
    <meta charset="utf-8" />
    <title>KanaPractice</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; }
      .option { display: block; width: 100%; margin: 0.4rem 0; padding: 0.75rem; border-radius: 0.5rem;
                border: 1px solid #334155; background: #1e293b; color: inherit; text-align: left; cursor: pointer; }
      .option:disabled { cursor: default; }
      .CORRECT { border-color: #22c55e; color: #4ade80; }
      .INCORRECT_SELECTED { border-color: #ef4444; color: #f87171; }
      .DIMMED { opacity: 0.5; }
      .stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 1rem; }
      .row { display: flex; justify-content: space-between; padding: 0.25rem 0; }
    </style>
  </head>
  <body>
    <section id="questions"></section>
    <section class="card"><h2>Statistics</h2><div id="stats" class="stats"></div></section>
    <script>
      async function loadQuestion(id) {
        const response = await fetch('/questions/' + id);
        return response.json();
      }

      function renderQuestion(container, payload) {
        container.innerHTML = payload.prompt_html;
        payload.options.forEach(option => {
          const button = document.createElement('button');
          button.className = 'option ' + option.state;
          button.textContent = option.label + '. ' + option.text;
          button.disabled = payload.answered;
          button.onclick = () => answer(container, payload.question_id, option.index);
          container.appendChild(button);
        });
        if (payload.answered) {
          const feedback = document.createElement('p');
          feedback.textContent = payload.feedback;
          container.appendChild(feedback);
          if (payload.explanation_html) {
            const explanation = document.createElement('div');
            explanation.innerHTML = payload.explanation_html;
            container.appendChild(explanation);
          }
        }
      }

      async function answer(container, id, index) {
        await fetch('/questions/' + id + '/answer', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ selected_option_index: index })
        });
        renderQuestion(container, await loadQuestion(id));
        refreshStats();
      }

      async function refreshStats() {
        const response = await fetch('/stats');
        const payload = await response.json();
        const root = document.getElementById('stats');
        root.innerHTML = '';
        payload.cards.forEach(card => {
          const element = document.createElement('div');
          const title = document.createElement('h3');
          title.textContent = card.title;
          element.appendChild(title);
          card.stats.forEach(item => {
            const row = document.createElement('div');
            row.className = 'row';
            row.innerHTML = '<span></span><strong></strong>';
            row.children[0].textContent = item.label;
            row.children[1].textContent = item.value;
            element.appendChild(row);
          });
          root.appendChild(element);
        });
      }

      async function init() {
        const response = await fetch('/questions');
        const payload = await response.json();
        const root = document.getElementById('questions');
        for (const summary of payload.questions) {
          const card = document.createElement('div');
          card.className = 'card';
          root.appendChild(card);
          renderQuestion(card, await loadQuestion(summary.question_id));
        }
        refreshStats();
      }

      init();
    </script>
  </body>
</html>
"""


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers."""

    selected_option_index: StrictInt


def _encode_stat(value: float | int | Sentinel) -> float | int | str | None:
    if value is Sentinel.INDETERMINATE:
        return None
    if value is Sentinel.INFINITE:
        return "Infinity"
    return value


def _serialize_outcome(outcome: AnswerOutcome) -> dict[str, object]:
    return {
        "question_id": outcome.question_id,
        "accepted": outcome.accepted,
        "selected_option_index": outcome.selected_index,
        "is_correct": outcome.is_correct,
        "feedback": outcome.feedback,
        "explanation_html": (
            renderer.render_fragment(outcome.explanation) if outcome.explanation else None
        ),
        "option_states": [state.name for state in outcome.option_states],
    }


def _get_practice_manager_dependency(practice_manager: PracticeManager):
    def dependency() -> PracticeManager:
        return practice_manager

    return dependency


def create_api_app(practice_manager: PracticeManager) -> FastAPI:
    """Create a FastAPI application wired to the provided practice manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    manager_dep = _get_practice_manager_dependency(practice_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_practice_page() -> str:
        return _PRACTICE_PAGE_HTML

    @app.get("/questions")
    def list_questions(manager: PracticeManager = Depends(manager_dep)) -> dict[str, object]:
        summaries = manager.get_question_summaries()
        return {
            "questions": [
                {
                    "question_id": question.id,
                    "character": question.character,
                    "option_count": question.option_count,
                    "answered": answered,
                }
                for question, answered in summaries
            ]
        }

    @app.get("/questions/{question_id}")
    def get_question(
        question_id: int,
        manager: PracticeManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            question = manager.get_question(question_id)
            states = manager.get_option_states(question_id)
            outcome = manager.get_answer_outcome(question_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc

        payload: dict[str, object] = {
            "question_id": question.id,
            "prompt_html": renderer.render_fragment(question.prompt),
            "options": [
                {
                    "index": index,
                    "label": label,
                    "text": text,
                    "state": states[index].name,
                }
                for index, (label, text) in enumerate(zip(question.option_labels, question.options))
            ],
            "answered": outcome is not None,
            "selected_option_index": None,
            "is_correct": None,
            "feedback": None,
            "explanation_html": None,
        }
        # Correctness and explanation are withheld until the answer is locked.
        if outcome is not None:
            serialized = _serialize_outcome(outcome)
            for key in ("selected_option_index", "is_correct", "feedback", "explanation_html"):
                payload[key] = serialized[key]
        return payload

    @app.post("/questions/{question_id}/answer")
    def submit_answer(
        question_id: int,
        payload: AnswerPayload,
        manager: PracticeManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            outcome = manager.select_option(question_id, payload.selected_option_index)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
        except IndexError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _serialize_outcome(outcome)

    @app.post("/questions/{question_id}/reset", status_code=204)
    def reset_question(
        question_id: int,
        manager: PracticeManager = Depends(manager_dep),
    ) -> None:
        try:
            manager.reset_question(question_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc

    @app.get("/stats")
    def get_stats(manager: PracticeManager = Depends(manager_dep)) -> dict[str, object]:
        stats = manager.get_session_stats()
        return {
            "num_correct": stats.num_correct,
            "num_wrong": stats.num_wrong,
            "total_answers": stats.total_answers,
            "accuracy_percent": stats.accuracy_percent,
            "correct_to_wrong_ratio": _encode_stat(stats.correct_to_wrong_ratio),
            "time_display": stats.time_display,
            "average_time": _encode_stat(stats.average_time),
            "fastest_time": _encode_stat(stats.fastest_time),
            "slowest_time": _encode_stat(stats.slowest_time),
            "characters_played": stats.characters_played,
            "unique_character_count": stats.unique_character_count,
            "easiest_characters": {
                "characters": list(stats.easiest_characters.characters),
                "value": _encode_stat(stats.easiest_characters.value),
            },
            "hardest_characters": {
                "characters": list(stats.hardest_characters.characters),
                "value": _encode_stat(stats.hardest_characters.value),
            },
            "cards": [
                {
                    "title": card.title,
                    "stats": [{"label": item.label, "value": item.value} for item in card.stats],
                }
                for card in build_dashboard(stats)
            ],
        }

    @app.delete("/stats", status_code=204)
    def reset_stats(manager: PracticeManager = Depends(manager_dep)) -> None:
        manager.reset_history()

    return app


def start_api_server(
    practice_manager: PracticeManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(practice_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="PracticeApiServer", daemon=True)
    thread.start()
    logger.info("Practice API listening on %s:%d", host, port)
    return thread
