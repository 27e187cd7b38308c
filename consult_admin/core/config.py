from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # DB 계정
    DB_USER: str
    DB_PASSWORD: str

    # DB 접속 정보
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str

    # 전체 접속 URL (지정 시 위 DB 설정 대신 사용)
    DATABASE_URL: Optional[str] = None

    # 서버 설정
    SERVER_PORT: int = 3000
    DEBUG: bool = False

    # CORS 허용 도메인
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "https://greenheadconsultancy.netlify.app",
        "https://www.greenheadconsultancy.netlify.app",
        "https://greenheadsconsultants.com",
        "https://www.greenheadsconsultants.com",
    ]

    # 인증 토큰
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    OTP_EXPIRE_MINUTES: int = 10

    # 비밀번호 해시 (scrypt 비용 파라미터)
    SCRYPT_N: int = 2 ** 14
    SCRYPT_R: int = 8
    SCRYPT_P: int = 1

    # 메일 발송 (SMTP)
    EMAIL_HOST: str = "smtp.zoho.in"
    EMAIL_PORT: int = 465
    EMAIL_USE_SSL: bool = True
    EMAIL_USERNAME: str = ""
    EMAIL_PASSWORD: str = ""

    # 문의 메일 수신 주소
    CONTACT_RECEIVER: str = ""
    CONSULT_RECEIVER: str = ""

    # 이미지 호스팅 (Cloudinary)
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""

    # 로그 설정
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # 환경변수 파일
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
        )


# 전역 설정 인스턴스
settings = Settings()
