# 📄 File: garden_assistant/modules/plant_assistant/domain/prompts.py
# 🧭 Purpose (Layman Explanation):
# The exact instructions we give the AI (in Persian) so that its answers always follow
# the same layout: plant name first, then an introduction, care tips and common problems.
# 🧪 Purpose (Technical Summary):
# Prompt templates and user-facing message strings. The reply parser depends on the
# bold field labels defined here.
# 🔄 Connected Modules / Calls From:
# GeminiModelService, reply_parser.py, ShareService, IdentificationFlow, SpeechCaptureStream

PLANT_NAME_LABEL = "نام گیاه:"
INTRODUCTION_LABEL = "معرفی:"

PLANT_IDENTIFICATION_PROMPT = f"""
شما یک دستیار متخصص باغبانی به زبان فارسی هستید. وظیفه شما شناسایی گیاه موجود در این تصویر است.
لطفاً پاسخ خود را با فرمت زیر و به زبان فارسی ارائه دهید:

**{PLANT_NAME_LABEL}** [نام رایج گیاه به فارسی] / [نام علمی به انگلیسی]

**{INTRODUCTION_LABEL}**
[توضیح مختصر و جالبی درباره گیاه، منشأ آن و ویژگی‌های اصلی آن.]

**دستورالعمل‌های مراقبت:**
*   **نور:** [توضیح کامل در مورد نیاز نوری گیاه. مثلا: نور غیرمستقیم و زیاد، تحمل نور کم و... ]
*   **آبیاری:** [توضیح کامل در مورد نحوه و زمان آبیاری. مثلا: خاک بین دو آبیاری خشک شود، همیشه مرطوب بماند و... ]
*   **خاک:** [نوع خاک مناسب برای گیاه. مثلا: خاک با زهکشی خوب، ترکیبی از پیت ماس و پرلیت و... ]
*   **دما و رطوبت:** [بازه دمایی و سطح رطوبت ایده‌آل برای گیاه.]
*   **کوددهی:** [زمان و نوع کود مناسب برای گیاه در فصول مختلف.]

**مشکلات رایج:**
[فهرستی از آفات و بیماری‌های شایع گیاه همراه با راه‌حل‌های ساده.]

اگر تصویر واضح نیست یا گیاهی در آن وجود ندارد، لطفاً به صورت محترمانه از کاربر بخواهید عکس بهتری ارسال کند.
"""

CHAT_SYSTEM_INSTRUCTION = (
    "شما یک دستیار باغبانی دانا و مفید به زبان فارسی هستید. "
    "به سوالات کاربران در مورد گیاهان و باغبانی به طور دقیق و دوستانه پاسخ دهید."
)

# User-facing messages
NO_IMAGE_SELECTED_MESSAGE = "لطفاً ابتدا یک عکس انتخاب کنید."
IDENTIFICATION_FAILED_MESSAGE = "خطایی در تحلیل تصویر رخ داد. لطفاً دوباره تلاش کنید."
CHAT_FAILED_MESSAGE = "خطایی در ارتباط با سرور رخ داد. لطفاً دوباره تلاش کنید."
EMPTY_MESSAGE_MESSAGE = "لطفاً پیام خود را بنویسید."
SEND_IN_PROGRESS_MESSAGE = "لطفاً تا دریافت پاسخ قبلی صبر کنید."
ANALYSIS_IN_PROGRESS_MESSAGE = "لطفاً تا پایان تحلیل تصویر صبر کنید."
SPEECH_ERROR_MESSAGE = "خطایی در تشخیص گفتار رخ داد."
DESCRIPTION_NOT_FOUND = "اطلاعاتی یافت نشد."

SHARE_TITLE_TEMPLATE = "🌿 گیاه شناسایی شده: {plant_name}"
SHARE_TEXT_TEMPLATE = (
    'من همین الان با دستیار باغبانی، گیاه "{plant_name}" را شناسایی کردم!'
    "\n\nمعرفی کوتاه:\n{description}"
)
