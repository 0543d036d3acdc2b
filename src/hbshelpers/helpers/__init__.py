"""Template helpers.

`HELPERS` maps every template-facing helper name to its implementation.
Some helpers declare keyword-only collaborator parameters (``formatter``,
``url_builder``, ``pluralizer``, ``random_source``, ``default_date_format``);
these are injected by `hbshelpers.bootstrap` before the helpers are handed to
a template engine.
"""

from collections.abc import Callable

from .conditionals import ifeq, ifnoteq
from .dates import date
from .markup import json_print, json_str, link
from .media import cdn_asset, cloudinary_img, cloudinary_url, file_type, img
from .text import (
    clean_string,
    email_format,
    inc_index,
    limit,
    lower_case,
    pluralize,
    remove_para,
    secure_url,
    trim,
    trim_pluralize,
    upper_case,
)

__all__ = ["HELPERS"]

HELPERS: dict[str, Callable[..., object]] = {
    "ifeq": ifeq,
    "ifnoteq": ifnoteq,
    "date": date,
    "cloudinaryUrl": cloudinary_url,
    "cloudinaryImg": cloudinary_img,
    "cdnAsset": cdn_asset,
    "jsonPrint": json_print,
    "jsonStr": json_str,
    "link": link,
    "img": img,
    "incIndex": inc_index,
    "fileType": file_type,
    "trim": trim,
    "limit": limit,
    "cleanString": clean_string,
    "emailFormat": email_format,
    "upperCase": upper_case,
    "lowerCase": lower_case,
    "pluralize": pluralize,
    "trimPluralize": trim_pluralize,
    "secureUrl": secure_url,
    "removePara": remove_para,
}
