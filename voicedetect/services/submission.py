"""Submission controller: owns the lifecycle of one classification attempt.

States: idle -> pending -> success | failure

The presentation layer reads ``state``, ``result``, ``error_message`` and
``is_busy``, and drives the controller through ``select_file()``,
``select_language()`` and ``submit()``. All mutation happens on the caller's
event loop; encoding and sending are awaited one after the other.

Usage::

    controller = create_controller()
    controller.select_file(AudioAsset.from_path("clip.wav"))
    outcome = await controller.submit()
"""

import logging

from voicedetect.core.config import Settings, get_settings
from voicedetect.core.exceptions import VoiceDetectError
from voicedetect.core.models import (
    AudioAsset,
    ClassificationResult,
    Language,
    SubmissionOutcome,
    SubmissionState,
    parse_language,
)
from voicedetect.services.detection import (
    MISSING_AUDIO_MESSAGE,
    BaseTransport,
    RequestBuilder,
    create_transport,
)

logger = logging.getLogger(__name__)


class SubmissionController:
    """State machine behind the "Analyze" action.

    At most one submission is in flight: ``submit()`` called while pending
    returns the current outcome without starting another request.

    Args:
        transport: Sends the built request to the classification service.
        builder: Builds the request from the selected file and language.
        language: Initially selected language.
    """

    def __init__(
        self,
        transport: BaseTransport,
        builder: RequestBuilder | None = None,
        language: Language | str = Language.hindi,
    ) -> None:
        self._transport = transport
        self._builder = builder or RequestBuilder()
        self._language = parse_language(language)
        self._audio: AudioAsset | None = None
        self._state = SubmissionState.idle
        self._result: ClassificationResult | None = None
        self._error_message = ""

    # -- presentation surface --

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def result(self) -> ClassificationResult | None:
        return self._result

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def is_busy(self) -> bool:
        return self._state is SubmissionState.pending

    @property
    def audio(self) -> AudioAsset | None:
        return self._audio

    @property
    def language(self) -> Language:
        return self._language

    @property
    def outcome(self) -> SubmissionOutcome:
        return SubmissionOutcome(
            state=self._state,
            result=self._result,
            error_message=self._error_message,
        )

    # -- user actions --

    def select_file(self, audio: AudioAsset | None) -> None:
        """Replace the selected file and clear any displayed error.

        The state and the last result are left untouched.
        """
        self._audio = audio
        self._error_message = ""

    def select_language(self, code: Language | str) -> None:
        """Select the submission language and clear any displayed error.

        Raises:
            ValidationError: If *code* is not a supported language.
        """
        self._language = parse_language(code)
        self._error_message = ""

    def reset(self) -> None:
        """Discard the selected file, result and error; return to idle."""
        if self.is_busy:
            logger.debug("Ignoring reset while a submission is pending")
            return
        self._audio = None
        self._result = None
        self._error_message = ""
        self._transition(SubmissionState.idle)

    async def submit(self) -> SubmissionOutcome:
        """Run one submission attempt to completion and return its outcome.

        Errors never propagate: their message becomes the failure payload.
        A response whose ``status`` is not ``"success"`` is still recorded
        as a success; ``ClassificationResult.is_verdict`` tells them apart.
        """
        if self.is_busy:
            logger.debug("Ignoring submit while a submission is pending")
            return self.outcome

        if self._audio is None:
            self._fail(MISSING_AUDIO_MESSAGE)
            return self.outcome

        self._error_message = ""
        self._result = None
        self._transition(SubmissionState.pending)

        try:
            request = await self._builder.build(self._audio, self._language)
            result = await self._transport.send(request)
        except VoiceDetectError as exc:
            self._fail(exc.detail)
        except Exception as exc:
            logger.exception("Unexpected error during submission")
            self._fail(str(exc))
        else:
            if not result.is_verdict:
                logger.warning(
                    "Service responded with status=%r; recording it as a success",
                    result.status,
                )
            self._result = result
            self._transition(SubmissionState.success)

        return self.outcome

    # -- internals --

    def _fail(self, message: str) -> None:
        logger.warning("Submission failed: %s", message)
        self._error_message = message
        self._transition(SubmissionState.failure)

    def _transition(self, state: SubmissionState) -> None:
        logger.debug("Submission state %s -> %s", self._state, state)
        self._state = state


def create_controller(settings: Settings | None = None, **kwargs) -> SubmissionController:
    """Create a controller wired to the configured HTTP transport.

    Args:
        settings: Source of endpoint, key and default language
            (defaults to the cached application settings).
        **kwargs: Passed through to ``create_transport``.
    """
    settings = settings or get_settings()
    return SubmissionController(
        transport=create_transport(settings, **kwargs),
        language=settings.default_language,
    )
