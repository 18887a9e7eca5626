# autoparts/services/exceptions.py

# --- General Exceptions ---
class PartNotFoundError(Exception):
    """부품을 찾을 수 없을 때"""
    pass

class CustomerNotFoundError(Exception):
    """고객을 찾을 수 없을 때"""
    pass

class OrderNotFoundError(Exception):
    """주문을 찾을 수 없을 때"""
    pass

# --- Creation/Validation Exceptions ---
class DuplicateDocumentError(Exception):
    """고유 키(부품 번호, 고객 ID, 주문 ID 등)가 이미 존재할 때"""
    pass

class FixtureLoadError(Exception):
    """JSON 픽스처 파일을 읽거나 해석하지 못했을 때"""
    pass

# --- Access Control Configuration Exceptions ---
class RoleTableError(Exception):
    """역할 테이블 구성 시 이름이 중복되는 등 설정이 잘못되었을 때"""
    pass

class UserDirectoryError(Exception):
    """사용자 디렉터리 구성 시 이름이 중복되는 등 설정이 잘못되었을 때"""
    pass
