from fastapi import APIRouter, Depends, Request, Response, status

from ....domain.ports import IPersonRepository
from ..schemas import PersonIn, PersonOut

router = APIRouter(prefix="/person", tags=["person"])

def get_repository(request: Request) -> IPersonRepository:
    return request.app.state.repository

@router.get("/allpeople", response_model=list[PersonOut])
def all_people(repo: IPersonRepository = Depends(get_repository)):
    return [PersonOut.model_validate(p) for p in repo.list_all()]

@router.post("/save", status_code=status.HTTP_200_OK, response_class=Response)
def save_person(payload: PersonIn, repo: IPersonRepository = Depends(get_repository)):
    # сохранённая запись не возвращается клиенту: тело ответа пустое
    repo.save(payload.to_domain())
    return Response(status_code=status.HTTP_200_OK)
