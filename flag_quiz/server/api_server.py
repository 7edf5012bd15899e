"""FastAPI server exposing the flag quiz to a browser."""

from __future__ import annotations

from dataclasses import asdict
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from flag_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from flag_quiz.constants.quiz_constants import FEEDBACK_DELAY_MS
from flag_quiz.core.errors import (
    DataUnavailableError,
    InsufficientCandidatesError,
    InsufficientPoolError,
    InvalidDifficultyError,
    QuizError,
)
from flag_quiz.core.markdown_renderer import country_card_markdown, renderer, results_markdown
from flag_quiz.core.models import FinalResults
from flag_quiz.core.quiz_manager import QuizManager

_PLAYER_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>FlagQuiz</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      .hidden { display: none; }
      .primary-button, .option-button { border: none; border-radius: 0.75rem; padding: 0.85rem 1.5rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; }
      .primary-button:disabled, .option-button:disabled { opacity: 0.6; cursor: not-allowed; }
      .options-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 0.75rem; }
      .option-button.correct { background: #16a34a; opacity: 1; }
      .option-button.incorrect { background: #dc2626; opacity: 1; }
      #flag { max-width: 320px; max-height: 200px; border: 1px solid #334155; }
      #stats { display: flex; gap: 1.5rem; color: #94a3b8; }
      #progress { width: 100%; height: 0.5rem; }
      iframe { width: 100%; height: 320px; border: 0; border-radius: 0.5rem; }
      #error { color: #f87171; min-height: 1.25rem; }
    </style>
  </head>
  <body>
    <section class="card" id="start-card">
      <h1>FlagQuiz</h1>
      <p>Which country does this flag belong to? Choose a difficulty.</p>
      <button class="primary-button" data-difficulty="beginner">Beginner</button>
      <button class="primary-button" data-difficulty="intermediate">Intermediate</button>
      <button class="primary-button" data-difficulty="advanced">Advanced</button>
    </section>
    <section class="card hidden" id="game-card">
      <div id="stats"><span id="counter"></span><span id="score"></span></div>
      <progress id="progress" max="100" value="0"></progress>
      <p><img id="flag" alt="Flag" /></p>
      <div id="options" class="options-grid"></div>
      <p id="feedback"></p>
      <div id="country-card"></div>
      <div id="map"></div>
    </section>
    <section class="card hidden" id="result-card">
      <div id="results"></div>
      <button class="primary-button" id="play-again">Play again</button>
      <button class="primary-button" id="back-to-start">Change difficulty</button>
    </section>
    <p id="error"></p>
    <script>
      const FEEDBACK_DELAY_MS = __FEEDBACK_DELAY_MS__;
      const startCard = document.getElementById('start-card');
      const gameCard = document.getElementById('game-card');
      const resultCard = document.getElementById('result-card');
      const errorEl = document.getElementById('error');

      function show(card) {
        [startCard, gameCard, resultCard].forEach(el => el.classList.toggle('hidden', el !== card));
      }

      async function call(method, path, body) {
        errorEl.textContent = '';
        const response = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined,
        });
        const payload = await response.json().catch(() => ({}));
        if (!response.ok) {
          errorEl.textContent = payload.detail || 'Request failed.';
          throw new Error(errorEl.textContent);
        }
        return payload;
      }

      function mapEmbed(highlight) {
        if (!highlight) return '';
        const lat = highlight.latitude, lon = highlight.longitude, d = 8;
        const bbox = [lon - d, lat - d, lon + d, lat + d].join(',');
        return `<iframe src="https://www.openstreetmap.org/export/embed.html?bbox=${bbox}&layer=mapnik&marker=${lat},${lon}"></iframe>`;
      }

      function render(state) {
        const status = state.status;
        const display = state.display;
        if (status.is_active) {
          show(gameCard);
          document.getElementById('counter').textContent = `Question ${status.question_index + 1} / ${status.total_questions}`;
          document.getElementById('score').textContent = `Score: ${display.score} / ${display.questions_answered}`;
          document.getElementById('progress').value = display.progress;
          document.getElementById('flag').src = display.flag_ref || '';
          const options = document.getElementById('options');
          options.innerHTML = '';
          display.option_names.forEach((name, idx) => {
            const button = document.createElement('button');
            button.className = 'option-button';
            button.textContent = name;
            button.disabled = status.is_answered;
            if (display.answer) {
              if (idx === display.answer.correct_index) button.classList.add('correct');
              else if (idx === display.answer.selected_index) button.classList.add('incorrect');
            }
            button.addEventListener('click', () => answer(idx));
            options.appendChild(button);
          });
          const feedback = document.getElementById('feedback');
          feedback.textContent = display.answer
            ? (display.answer.is_correct ? `Correct! It is ${display.answer.correct_display_name}.`
                                         : `Not quite. The answer was ${display.answer.correct_display_name}.`)
            : '';
          document.getElementById('country-card').innerHTML = state.card_html || '';
          document.getElementById('map').innerHTML = mapEmbed(display.highlighted);
        } else if (display.results) {
          show(resultCard);
          document.getElementById('results').innerHTML = state.results_html || '';
        } else {
          show(startCard);
        }
      }

      async function refresh() {
        render(await call('GET', '/state'));
      }

      async function start(difficulty) {
        await call('POST', '/session/start', { difficulty });
        await refresh();
      }

      async function answer(idx) {
        const outcome = await call('POST', '/answer', { selected_option_index: idx });
        await refresh();
        if (outcome.accepted) {
          setTimeout(async () => {
            await call('POST', '/advance');
            await refresh();
          }, FEEDBACK_DELAY_MS);
        }
      }

      document.querySelectorAll('[data-difficulty]').forEach(button =>
        button.addEventListener('click', () => start(button.dataset.difficulty)));
      document.getElementById('play-again').addEventListener('click', async () => {
        await call('POST', '/session/restart', { same_difficulty: true });
        await refresh();
      });
      document.getElementById('back-to-start').addEventListener('click', async () => {
        await call('POST', '/session/restart', { same_difficulty: false });
        await refresh();
      });
      refresh();
    </script>
  </body>
</html>
""".replace("__FEEDBACK_DELAY_MS__", str(FEEDBACK_DELAY_MS))


class StartPayload(BaseModel):
    """Payload schema for starting a session."""

    difficulty: str


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers."""

    selected_option_index: int


class RestartPayload(BaseModel):
    """Payload schema for restarting a session."""

    same_difficulty: bool = False


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _http_error(exc: QuizError) -> HTTPException:
    if isinstance(exc, InvalidDifficultyError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, InsufficientPoolError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, DataUnavailableError):
        return HTTPException(status_code=503, detail=str(exc))
    if isinstance(exc, InsufficientCandidatesError):
        return HTTPException(status_code=500, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


def _results_payload(results: FinalResults | None) -> dict[str, object] | None:
    return asdict(results) if results is not None else None


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title="FlagQuiz API", version="0.1.0")
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_player_page() -> str:
        return _PLAYER_PAGE_HTML

    @app.get("/state")
    def get_state(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        view = manager.get_view()
        status = view.status
        display = view.display

        card_html = None
        if view.question is not None and status.is_answered:
            card_html = renderer.render_fragment(
                country_card_markdown(view.question.correct, view.language)
            )

        results_html = None
        results = display.get("results")
        if results:
            results_html = renderer.render_fragment(results_markdown(FinalResults(**results)))

        return {
            "status": asdict(status),
            "display": display,
            "card_html": card_html,
            "results_html": results_html,
            "language": view.language,
        }

    @app.get("/statistics")
    def get_statistics(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return asdict(manager.get_score_statistics())

    @app.post("/session/start", status_code=201)
    def start_session(
        payload: StartPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            status = manager.start_session(payload.difficulty)
        except QuizError as exc:
            raise _http_error(exc) from exc
        return asdict(status)

    @app.post("/answer")
    def submit_answer(
        payload: AnswerPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            outcome = manager.submit_answer(payload.selected_option_index)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        if outcome is None:
            return {"accepted": False}
        return {
            "accepted": True,
            "is_correct": outcome.is_correct,
            "selected_option_index": outcome.selected_option_index,
            "correct_option_index": outcome.correct_option_index,
            "correct_country_id": outcome.correct_country.id,
            "correct_country_name": outcome.correct_country.display_name(manager.get_language()),
        }

    @app.post("/advance")
    def advance(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            status = manager.advance()
        except QuizError as exc:
            raise _http_error(exc) from exc
        return asdict(status)

    @app.post("/session/end")
    def end_session(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return {"results": _results_payload(manager.end_session())}

    @app.post("/session/restart")
    def restart_session(
        payload: RestartPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        try:
            status = manager.restart_session(same_difficulty=payload.same_difficulty)
        except QuizError as exc:
            raise _http_error(exc) from exc
        return asdict(status)

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="FlagQuizApiServer", daemon=True)
    thread.start()
    return thread
