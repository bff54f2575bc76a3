from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from fastapi.responses import FileResponse

from ..errors import BadRequest, NotADirectory, NotFound, ResourceIOError
from ..schemas import ErrorResponse, MessageResponse, RenameResponse
from ..services.dust import Dust

router = APIRouter(tags=['dust'], responses={400: {'model': ErrorResponse}, 404: {'model': ErrorResponse}, 500: {'model': ErrorResponse}})


def get_dust(request: Request) -> Dust:
    return request.app.state.dust


@router.get('')
def root_listing(dust: Dust = Depends(get_dust)):
    try:
        listing = dust.listing(dust.devices.root)
    except (NotFound, NotADirectory, ResourceIOError) as exc:
        raise BadRequest(exc.message) from exc
    return listing.model_dump(exclude_none=True)


@router.get('/{resource:path}')
def read_resource(resource: str, dust: Dust = Depends(get_dust)):
    path = dust.devices.resolve(resource)
    if not path.exists():
        raise NotFound('No such file or directory')

    if path.is_dir():
        try:
            listing = dust.listing(path)
        except (NotADirectory, ResourceIOError) as exc:
            raise BadRequest(exc.message) from exc
        return listing.model_dump(exclude_none=True)

    return FileResponse(path)


@router.put('/{resource:path}', response_model=MessageResponse)
def write_resource(
    resource: str,
    kind: Optional[str] = Query(default=None, pattern='^(directory|file)$'),
    value: Optional[UploadFile] = File(default=None),
    dust: Dust = Depends(get_dust),
):
    path = dust.devices.resolve(resource)
    name = dust.devices.name_of(path)

    if kind == 'directory':
        dust.mutator.create_directory(path)
        return MessageResponse(message=f'created directory {name}')

    if value is None:
        raise BadRequest("missing 'value' file in form")
    size = dust.mutator.store_file(path, value.file)
    return MessageResponse(message=f'uploaded {value.filename} ({value.content_type}, {size}) to {name}')


@router.patch('/{resource:path}', response_model=RenameResponse)
def rename_resource(resource: str, name: Optional[str] = Form(default=None), dust: Dust = Depends(get_dust)):
    path = dust.devices.resolve(resource)
    return RenameResponse(url=dust.mutator.rename(path, name))


@router.delete('/{resource:path}', response_model=MessageResponse)
def delete_resource(resource: str, dust: Dust = Depends(get_dust)):
    path = dust.devices.resolve(resource)
    name = dust.devices.name_of(path)
    dust.mutator.delete(path)
    return MessageResponse(message=f'deleted {name}')
