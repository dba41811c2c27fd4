"""English messages for the error codes returned by the netdisk services."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_UNKNOWN = "Unknow error"

_LOGIN: Mapping[int, str] = MappingProxyType({
    -1: "System error, try again later",
    0: "Success",
    1: "Incorrect username",
    2: "Username not exist",
    3: "Captcha invalid, try again",
    4: "Wrong password",
    5: "There is a security risk in your network, please use SMS to log in.",
    6: "Wrong captcha.",
    7: "Wrong password, try sms password.",
    16: "Your account has been locked.",
    17: "Your account has been locked. Login after unlock your account.",
    18: "",
    257: "Wrong captcha.",
    100005: "System error. Please try again later.",
    100023: "Cookie must be open for login.",
    100027: "System upgrading... Unable to provide services. Please try again later.",
    110024: "This account is not activated. Resending the activation email.",
    120016: "Account is at risk, please bind your phone on the netdisk website.",
    120019: "See popped out window.",
    120021: "Wrong SMS password, please try again",
    200010: "Captcha not exist or expired.",
    400031: "See popped out window.",
    400032: "",
    400034: "",
    400037: "",
    400401: "",
    401007: "Your phone number was associated with more than one account, "
            "please login with the user name.",
    500010: "Login too frequently, please try again after 24 hours.",
})

_ERRNO: Mapping[int, str] = MappingProxyType({
    0: "Success.",
    1: "Server Error.",
    2: "The folder can not being move.",
    3: "Can not operation files more than 100 at one time.",
    4: "New file name error.",
    5: "Target directory illegal.",
    6: "Alternate",
    7: "NS illegal or Access Denied.",
    8: "ID illegally or Access Denied",
    9: "Applicate key failure",
    10: "Failed to create a file of superfile",
    11: "user_id (or user_name) illegal or non-exist",
    12: "Batch processing is not successful at all.",
    13: "This directory can not be shared",
    103: "File passcode error",
    104: "Invalid cookie authentication",
    14: "System error",
    201: "System error",
    202: "System error",
    203: "System error",
    204: "System error",
    205: "System error",
    211: "No Permissions or banned",
    301: "Other request error",
    404: "Second pass md5 mismatch error code rapidupload",
    406: "Sec transfer error code Failed to create file rapidupload",
    407: "fileModify interface returns an error, requestid rapidupload "
         "does not return an error code",
    501: "LIST format acquired illegally",
    600: "json parse error",
    601: "exception thrown",
    617: "getFilelist other error",
    618: "Request curl returns failure",
    619: "pcs returns an error code",
    31021: "Network connection fails. Check the network or try again later.",
    31075: "One in support of Operation 999, minus point try",
    31080: "Server error. Try again later.",
    31116: "You have been reach the quota. Buy more!",
    -1: "Password authentication failed",
    -2: "Alternate",
    -3: "The user does not activate (call init interface)",
    -4: "Can't find host_key and user_key (BDUSS) from COOKIE",
    -5: "host_key and user_key (BDUSS) are invalid",
    -6: "BDUSS invalid",
    -7: "File / directory name wrong, or do not have access to",
    -8: "This file is already exists in this directory",
    -9: "Owner of the file is deleted, operation failed",
    -10: "Network Disk quota reached.",
    -11: "Parent directory does not exist",
    -12: "Device not registered",
    -13: "Device is already bounded to your account",
    -14: "Account has been initialized",
    -21: "Preset files can not be related operations",
    -22: "The file can not be shared rename, move, and so",
    -23: "Database operation fails. Contact baidu administrator",
    -24: "No cancellations public file containing a list of files you want to cancel.",
    -25: "Non-beta user",
    -26: "Invalid invitation code",
})

_SHARE: Mapping[int, str] = MappingProxyType({
    0: "Success",
    2: "Parameter error",
    3: "Not logged in or have an invalid account",
    4: "Storage error, please try again later",
    108: "Filename have sensitive word. Rename it.",
    110: "Share the number exceeds the limit, you can go to \"my share\" "
         "in the view shared file links",
    114: "The current mandate does not exist. Saving fails",
    115: "The document prohibits to Share",
    -1: "Because you have been shared a file in violation of relevant laws and "
        "regulations, sharing has been disabled. (History share out files are "
        "not affected.)",
    -2: "User does not exist, please try again later.",
    -3: "File does not exist, please try again later.",
    -4: "Login information is incorrect, please try to login again",
    -5: "host_key and user_key invalid",
    -6: "Please sign in again",
    -7: "The share has been deleted or canceled",
    -8: "The share has been deleted or canceled",
    -9: "Access password error",
    -10: "Share the chain has reached the maximum upper limit 100 000, "
         "can not share again",
    -11: "Invalid authentication cookie",
    -14: "Sorry, SMS share 20 daily limit, you have to share finished today, "
         "please come back tomorrow to share it!",
    -15: "Sorry, the message share limit 20 per day, you have to share finished "
         "today, please come back tomorrow to share it!",
    -16: "Sorry, the document has restricted share!",
    -17: "File sharing over the limit",
    -30: "File already exists",
    -31: "File Save Failed",
    -33: "Once supported operating 10,000, minus point try",
    -32: "Your space inadequate yo, and quickly buy space bar",
    -70: "You share the file contains a virus or virus-like, to you and to "
         "others data security, another file-sharing it",
})

_DOWNLOAD: Mapping[int, str] = MappingProxyType({
    36000: "Network busy, please try again later",
    36001: "Parameter error",
    36002: "appid error",
    36003: "Please try refresh",
    36004: "Please sign in again",
    36005: "User is not logged",
    36006: "The user does not activate",
    36007: "User is not authorized",
    36008: "User does not exist",
    36009: "User space shortage",
    36010: "File does not exist",
    36012: "The operation timed out, please try again",
    36013: "At the same task much download can not be downloaded",
    36014: "Storage path has been used",
    36016: "Task has been deleted",
    36017: "Task completed",
    36018: "Resolution fails, the seed file is corrupted",
    36019: "The task is being processed",
    36020: "Task address does not exist",
    36021: "Max ordinary users download a task Oh! Immediately turn off "
           "download packages Download More!",
    36022: "At the same task much download can not be downloaded",
    36023: "Ordinary users can only download offline 5 monthly task Oh! "
           "Immediately turn off download packages Download More!",
    36024: "This month downloads exceeded limit",
    36025: "Share link has expired",
    36026: "Link malformed",
    36027: "Link malformed",
    36028: "Temporarily unable to find the relevant seed information",
    36031: "Network busy, please try again later",
    -19: "Please enter the verification code",
})

_DOWNGRADE = ("Uh oh, you can not upgrade from Advanced Package to lower packages, "
              "please re-purchase it.")
_ORDER_FAILED = "Lol, create orders failed, please try again later about it."
_SAME_DAY = "Lol, can not buy the same product on the same day, please re-purchase it."
_PAID = "Lol, the order has been successful payment, please re-purchase it."
_SERVER_COLD = "Lol, server cold, urgent medical treatment in ......"

_BUY: Mapping[int, str] = MappingProxyType({
    1000: _DOWNGRADE,
    1001: _DOWNGRADE,
    1002: _ORDER_FAILED,
    1003: _ORDER_FAILED,
    1004: _ORDER_FAILED,
    1005: _ORDER_FAILED,
    1006: _SAME_DAY,
    1007: _SAME_DAY,
    3002: _PAID,
    3003: "Lol, the order has been paid fail, please re-purchase it.",
    36000: _SERVER_COLD,
    36001: _SERVER_COLD,
    36002: _SERVER_COLD,
    36003: "The visit anomaly, an authority restricted",
    36005: "Verification code input errors, please refresh retry",
    36006: "Uh oh, we did not launch this product ah",
    36007: "As an exception, a cup of tea next to retry?",
    36008: "Oh, abnormal your operation, please refresh and try again.",
    36009: "Foundation course allowed to buy",
    36010: _SERVER_COLD,
    36011: _SERVER_COLD,
    36012: _SERVER_COLD,
    36013: "The order can not be re-paid",
    36014: _PAID,
    36015: _SERVER_COLD,
    36016: _SERVER_COLD,
    36017: _SERVER_COLD,
    36018: _SERVER_COLD,
    36019: _SERVER_COLD,
})

_RECORD: Mapping[int, str] = MappingProxyType({
    36000: "Internal error",
    36001: "Unsupported API",
    36002: "Parameter error",
    36003: "No access",
    36005: "Code invalid or illegal",
    36006: "To purchase the product does not exist",
    36007: "Users operate in parallel in the process of buying the product, "
           "but could not get the error code",
    36016: "This function is not property values and can not get access systems concern",
    36017: "This feature is not a consumer value, not consumption, access systems concern",
    36018: "Function items to be consumed is not found, access systems concern",
    36019: "Refusal to consume, the user does not have quotas, access systems concern",
    36020: "Request replay",
    36021: "Request expired, or a third party request forgery",
    36031: "Third party api parameter error",
    36032: "Third party api signature error",
    36033: "Third party api file error",
    36034: "Database Error",
    36035: "Orders already exist",
    36036: "Order token failure",
    36037: "Check Order does not exist",
    36038: "Provinces parameter error",
    36039: "Price does not exist",
})


def login_errmsg(code: int) -> str:
    """Message for a login error code."""
    return _LOGIN.get(code, "Unknown error.")


def errmsg_by_errno(code: int) -> str:
    """Message for a general netdisk API error number."""
    return _ERRNO.get(code, "Unknown error")


def share_errmsg(code: int) -> str:
    """Message for a file-sharing error number."""
    return _SHARE.get(code, _UNKNOWN)


def download_errmsg(code: int) -> str:
    """Message for an offline-download error number."""
    return _DOWNLOAD.get(code, _UNKNOWN)


def buy_errmsg(code: int) -> str:
    """Message for a package-purchase error number."""
    return _BUY.get(code, _UNKNOWN)


def record_errmsg(code: int) -> str:
    """Message for a purchase-record error number."""
    return _RECORD.get(code, _UNKNOWN)