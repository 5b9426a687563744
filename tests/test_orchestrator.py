"""Tests for the generation orchestrator."""

import asyncio

import pytest

from flavor_sketch import (
    BeanDetails,
    CardStore,
    ErrorState,
    FlavorCardOrchestrator,
    GeneratingState,
    IdleState,
    ImageResult,
    SuccessState,
)
from flavor_sketch.config import DEFAULT_BACKGROUND_COLOR
from flavor_sketch.exceptions import GatewayError, NoImageData
from flavor_sketch.providers.base import BaseGateway
from flavor_sketch.schema import TranslationPayload


class FakeGateway(BaseGateway):
    """In-memory gateway recording every call."""

    def __init__(self, *, color="#FFF0F5", image=None, image_error=None, translation=None, translate_error=None):
        self.color = color
        self.image = image or ImageResult(data=b"png-bytes")
        self.image_error = image_error
        self.translation = translation
        self.translate_error = translate_error
        self.calls = []
        self.release = None

    async def infer_background_color(self, notes):
        self.calls.append(("color", notes))
        if isinstance(self.color, Exception):
            raise self.color
        return self.color

    async def generate_image(self, notes, background_color):
        self.calls.append(("image", notes, background_color))
        if self.release is not None:
            await self.release.wait()
        if self.image_error is not None:
            raise self.image_error
        return self.image

    async def translate(self, notes, details):
        self.calls.append(("translate", notes, details))
        if self.translate_error is not None:
            raise self.translate_error
        return self.translation or TranslationPayload(notes=notes, details=details)


def _orchestrator(gateway, notes="Jasmine, bergamot, apricot", details=None, **kwargs):
    store = CardStore(notes=notes, details=details)
    return FlavorCardOrchestrator(gateway, store, **kwargs)


def test_scenario_a_full_success():
    details = BeanDetails(name="Yirgacheffe", origin="Ethiopia")
    gateway = FakeGateway(
        color="#FFF8DC",
        translation=TranslationPayload(notes="Jasmine, bergamot, apricot", details=details),
    )
    orchestrator = _orchestrator(gateway, details=details)

    state = asyncio.run(orchestrator.generate())

    assert isinstance(state, SuccessState)
    assert orchestrator.store.state is state
    assert state.result.background_color == "#FFF8DC"
    assert state.result.translated_notes == "Jasmine, bergamot, apricot"
    assert state.result.translated_details == details
    assert ("image", "Jasmine, bergamot, apricot", "#FFF8DC") in gateway.calls


def test_translated_text_is_used_on_success():
    gateway = FakeGateway(
        translation=TranslationPayload(notes="草莓, 香草", details=BeanDetails(name="衣索比亞"))
    )
    orchestrator = _orchestrator(gateway, notes="草莓, 香草", details=BeanDetails(name="衣索比亚"))

    state = asyncio.run(orchestrator.generate())

    assert state.result.translated_details.name == "衣索比亞"


def test_scenario_b_translation_unreachable_keeps_original():
    details = BeanDetails(name="衣索比亚", roaster="Fritz")
    gateway = FakeGateway(translate_error=GatewayError("translation endpoint unreachable"))
    orchestrator = _orchestrator(gateway, notes="草莓, 香草", details=details)

    state = asyncio.run(orchestrator.generate())

    assert isinstance(state, SuccessState)
    assert state.result.translated_notes == "草莓, 香草"
    assert state.result.translated_details == details


def test_scenario_c_no_image_data_is_error():
    gateway = FakeGateway(image_error=NoImageData("No image data found in response"))
    orchestrator = _orchestrator(gateway, notes="Dark chocolate")

    state = asyncio.run(orchestrator.generate())

    assert isinstance(state, ErrorState)
    assert state.message
    assert not hasattr(state, "result")
    assert orchestrator.store.view().image is None


@pytest.mark.parametrize("notes", ["", "   ", "\n\t"])
def test_scenario_d_blank_notes_do_nothing(notes):
    gateway = FakeGateway()
    orchestrator = _orchestrator(gateway, notes=notes)

    assert asyncio.run(orchestrator.generate()) is None
    assert isinstance(orchestrator.store.state, IdleState)
    assert gateway.calls == []


def test_image_failure_wins_over_translation_success():
    gateway = FakeGateway(
        image_error=GatewayError("Image generation failed: 503"),
        translation=TranslationPayload(notes="translated", details=BeanDetails()),
    )
    orchestrator = _orchestrator(gateway)

    state = asyncio.run(orchestrator.generate())

    assert isinstance(state, ErrorState)
    assert state.message == "Image generation failed: 503"


def test_unexpected_image_exception_becomes_generic_error():
    gateway = FakeGateway(image_error=RuntimeError("boom"))
    orchestrator = _orchestrator(gateway)

    state = asyncio.run(orchestrator.generate())

    assert isinstance(state, ErrorState)
    assert state.message == "Something went wrong while drawing."


@pytest.mark.parametrize("color", ["not-a-color", "#12345", None, 0xFFF0F5, ValueError("color call failed")])
def test_bad_color_falls_back(color):
    gateway = FakeGateway(color=color)
    orchestrator = _orchestrator(gateway)

    state = asyncio.run(orchestrator.generate())

    assert isinstance(state, SuccessState)
    assert state.result.background_color == DEFAULT_BACKGROUND_COLOR
    assert ("image", "Jasmine, bergamot, apricot", DEFAULT_BACKGROUND_COLOR) in gateway.calls


def test_image_reference_identity_preserved():
    image = ImageResult(data=b"exact-bytes", mime_type="image/webp")
    gateway = FakeGateway(image=image)
    orchestrator = _orchestrator(gateway)

    state = asyncio.run(orchestrator.generate())

    assert state.result.image is image


def test_color_is_inferred_before_image_is_generated():
    gateway = FakeGateway(color="#E0FFE0")
    orchestrator = _orchestrator(gateway)

    asyncio.run(orchestrator.generate())

    kinds = [call[0] for call in gateway.calls]
    assert kinds.index("color") < kinds.index("image")


def test_begin_transitions_synchronously():
    gateway = FakeGateway()
    orchestrator = _orchestrator(gateway, details=BeanDetails(name="Kenya AA"))

    request = orchestrator.begin()

    assert isinstance(orchestrator.store.state, GeneratingState)
    assert orchestrator.store.state.request == request
    assert request.notes == "Jasmine, bergamot, apricot"
    assert gateway.calls == []


def test_trigger_while_generating_is_ignored():
    async def scenario():
        gateway = FakeGateway()
        gateway.release = asyncio.Event()
        orchestrator = _orchestrator(gateway)

        task = orchestrator.trigger()
        assert isinstance(orchestrator.store.state, GeneratingState)
        await asyncio.sleep(0)
        generating = orchestrator.store.state
        calls_before = list(gateway.calls)

        assert orchestrator.trigger() is None
        assert await orchestrator.generate() is None
        assert orchestrator.store.state is generating
        assert gateway.calls == calls_before

        gateway.release.set()
        final = await task
        return gateway, final

    gateway, final = asyncio.run(scenario())

    assert isinstance(final, SuccessState)
    assert [call[0] for call in gateway.calls].count("image") == 1


def test_edits_during_flight_do_not_leak_into_request():
    async def scenario():
        gateway = FakeGateway()
        gateway.release = asyncio.Event()
        orchestrator = _orchestrator(gateway, notes="Peach", details=BeanDetails(name="Gesha"))

        task = orchestrator.trigger()
        await asyncio.sleep(0)
        orchestrator.store.set_notes("Tobacco")
        orchestrator.store.set_detail("name", "Robusta")
        gateway.release.set()
        return orchestrator, await task

    orchestrator, final = asyncio.run(scenario())

    assert final.result.translated_notes == "Peach"
    assert final.result.translated_details.name == "Gesha"
    view = orchestrator.store.view()
    assert view.notes == "Peach"
    assert orchestrator.store.notes == "Tobacco"


def test_new_trigger_after_error_overwrites_state():
    gateway = FakeGateway(image_error=NoImageData("no image"))
    orchestrator = _orchestrator(gateway)

    first = asyncio.run(orchestrator.generate())
    gateway.image_error = None
    second = asyncio.run(orchestrator.generate())

    assert isinstance(first, ErrorState)
    assert isinstance(second, SuccessState)
    assert orchestrator.store.state is second


def test_simple_variant_skips_color_and_translation():
    gateway = FakeGateway()
    orchestrator = _orchestrator(gateway, infer_color=False, translate=False, fallback_color="#FAFAFA")

    state = asyncio.run(orchestrator.generate())

    assert state.result.background_color == "#FAFAFA"
    assert [call[0] for call in gateway.calls] == ["image"]


def test_invalid_fallback_color_rejected():
    with pytest.raises(ValueError):
        _orchestrator(FakeGateway(), infer_color=False, fallback_color="cream")


def test_unusable_image_result_ends_in_error_and_allows_retrigger():
    gateway = FakeGateway(image="not-an-image")
    orchestrator = _orchestrator(gateway)

    state = asyncio.run(orchestrator.generate())

    assert isinstance(state, ErrorState)
    assert state.message == "Something went wrong while drawing."
    assert orchestrator.store.state is state
    assert orchestrator.begin() is not None
