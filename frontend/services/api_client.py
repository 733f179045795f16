# frontend/services/api_client.py
from typing import List, Optional, Dict, Any
import os, requests

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")

NETWORK_ERROR = "Unable to reach the server"


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _url(p: str) -> str:
    return f"{API_BASE_URL}/api{p}"

def _headers(token: Optional[str]) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token else {}

def _err(resp: requests.Response) -> str:
    try:
        j = resp.json()
        if isinstance(j, dict) and "detail" in j:
            return str(j["detail"])
        return str(j)
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"

def _call(method: str, path: str, token: Optional[str] = None, timeout: int = 15, **kwargs) -> Any:
    try:
        r = requests.request(method, _url(path), headers=_headers(token), timeout=timeout, **kwargs)
    except requests.exceptions.RequestException as e:
        raise ApiError(NETWORK_ERROR) from e
    if r.status_code >= 400:
        raise ApiError(_err(r), r.status_code)
    return r.json()

def _clean(params: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


# ---- Auth ----
def register(name: str, email: str, password: str, role: str = "buyer",
             phone: Optional[str] = None, company_name: Optional[str] = None) -> Dict[str, Any]:
    payload = _clean({"name": name, "email": email, "password": password, "role": role,
                      "phone": phone, "companyName": company_name})
    return _call("POST", "/auth/register", json=payload)

def login(email: str, password: str) -> Dict[str, Any]:
    """Returns {"user": ..., "token": ...}."""
    return _call("POST", "/auth/login", json={"email": email, "password": password})

def get_me(token: str) -> Dict[str, Any]:
    return _call("GET", "/auth/me", token)


# ---- Categories ----
def get_categories() -> List[Dict[str, Any]]:
    return _call("GET", "/categories")["data"]


# ---- Products ----
def get_products(search: Optional[str] = None, category: Optional[str] = None,
                 sort: Optional[str] = None, page: int = 1, limit: int = 12) -> Dict[str, Any]:
    params = _clean({"search": search, "category": category, "sort": sort, "page": page, "limit": limit})
    return _call("GET", "/products", params=params, timeout=10)

def get_product(ident: str, token: Optional[str] = None) -> Dict[str, Any]:
    return _call("GET", f"/products/{ident}", token, timeout=10)

def get_my_products(token: str, status: Optional[str] = None, page: int = 1) -> Dict[str, Any]:
    return _call("GET", "/products/seller/my-products", token, params=_clean({"status": status, "page": page}))

def create_product(token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return _call("POST", "/products", token, json=payload)["data"]

def update_product(token: str, product_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return _call("PUT", f"/products/{product_id}", token, json=payload)

def delete_product(token: str, product_id: int) -> None:
    _call("DELETE", f"/products/{product_id}", token, timeout=10)


# ---- Inquiries ----
def send_inquiry(token: str, product_id: int, subject: str, message: str, **extra) -> Dict[str, Any]:
    """extra: quantity, quantityUnit, buyerPhone, buyerCompany, deliveryLocation."""
    payload = {"productId": product_id, "subject": subject, "message": message, **_clean(extra)}
    return _call("POST", "/inquiries", token, json=payload)

def get_my_inquiries(token: str, status: Optional[str] = None, page: int = 1) -> Dict[str, Any]:
    return _call("GET", "/inquiries/my-inquiries", token, params=_clean({"status": status, "page": page}))

def get_seller_inquiries(token: str, status: Optional[str] = None, page: int = 1) -> Dict[str, Any]:
    return _call("GET", "/inquiries/seller-inquiries", token, params=_clean({"status": status, "page": page}))

def get_inquiry(token: str, inquiry_id: int) -> Dict[str, Any]:
    return _call("GET", f"/inquiries/{inquiry_id}", token)

def respond_to_inquiry(token: str, inquiry_id: int, response: str) -> Dict[str, Any]:
    return _call("PUT", f"/inquiries/{inquiry_id}/respond", token, json={"response": response})["data"]

def mark_inquiry_read(token: str, inquiry_id: int) -> Dict[str, Any]:
    return _call("PUT", f"/inquiries/{inquiry_id}/read", token)


# ---- Admin moderation ----
def approve_seller(token: str, user_id: int, approved: bool = True) -> Dict[str, Any]:
    return _call("PUT", f"/admin/users/{user_id}/approve", token, json={"approved": approved})["data"]

def toggle_user_active(token: str, user_id: int) -> Dict[str, Any]:
    return _call("PUT", f"/admin/users/{user_id}/toggle-active", token)["data"]

def approve_product(token: str, product_id: int, approved: bool = True) -> Dict[str, Any]:
    return _call("PUT", f"/admin/products/{product_id}/approve", token, json={"approved": approved})["data"]
