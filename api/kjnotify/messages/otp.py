"""One-time passcode SMS template."""

OTP_EXPIRY_MINUTES = 10


def render_otp(otp: str, brand_name: str) -> str:
    return (
        f"Your {brand_name} verification code is: {otp}. "
        f"This code expires in {OTP_EXPIRY_MINUTES} minutes."
    )
