from .customer import ICustomerRepository
from .order import IOrderRepository
from .part import IPartRepository
from .role import IRoleRepository
from .sales_order import ISalesOrderRepository
