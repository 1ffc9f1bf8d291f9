from job_portal.database.gateway import StorageGateway, InvalidIdentifier, parse_object_id
from job_portal.database.mongo import MongoGateway

_gateway = MongoGateway()

# 저장소 게이트웨이를 제공하는 의존성 함수 (테스트에서 dependency_overrides 로 교체)
def get_gateway() -> StorageGateway:
    return _gateway
