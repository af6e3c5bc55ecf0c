"""Languages routes — the language codes translation sets are keyed by."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response, status

from showcase_admin.backend.repositories.languages import LanguageRepository
from showcase_admin.models.language import Language, LanguageDraft

router = APIRouter(prefix="/languages", tags=["languages"])


def _repository(request: Request) -> LanguageRepository:
    settings = request.app.state.settings
    return LanguageRepository(request.app.state.backend, settings.languages.codes)


def _view(language: Language) -> dict[str, Any]:
    return language.model_dump(mode="json", include={"id", "code", "name"})


@router.get("")
async def list_languages(request: Request) -> list[dict[str, Any]]:
    languages = await _repository(request).list_all()
    return [_view(language) for language in languages]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_language(request: Request, draft: LanguageDraft) -> dict[str, Any]:
    language = await _repository(request).create(draft.code, draft.name)
    return _view(language)


@router.put("/{language_id}")
async def update_language(
    request: Request,
    language_id: str,
    draft: LanguageDraft,
) -> dict[str, Any]:
    language = await _repository(request).update(
        language_id, code=draft.code, name=draft.name
    )
    return _view(language)


@router.delete("/{language_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_language(request: Request, language_id: str) -> Response:
    await _repository(request).delete(language_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
