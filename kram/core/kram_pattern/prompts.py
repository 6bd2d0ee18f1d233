"""Prompt templates for Kram pattern generation.

Fixed image brief for the indigo cross-stitch style, per-style guidance,
and the Thai-language system prompts used for description and tagging.

Dependencies: None (pure prompt templates)
System role: Instruction set for the image and chat calls
"""

KRAM_PROMPT_TEMPLATE = """A flat 2D pattern inspired by traditional Thai indigo textile (ผ้าครามพื้นเมือง), shown in the style of counted-thread embroidery or cross-stitch chart. The design should consist of repeating geometric folk motifs such as diamonds, chevrons, stars, and small ornamental crosses. The layout must be symmetrical, pixel-perfect, and arranged on a precise square grid. The appearance should be flat, digital, and sharp-edged, resembling a cross-stitch embroidery guide rather than real fabric texture.

Use a limited color palette of deep indigo blue (คราม) and white background for contrast. Avoid gradients, shadows, folds, or realistic cloth rendering. Focus only on the geometric motif structure.

The embroidery pattern {user_prompt}

{tag_context}

Technical requirements:
- Pixel grid cross-stitch style
- Traditional indigo folk motifs (ผ้าคราม style)
- Symmetrical, repeating geometric layout
- Limited solid colors: deep indigo, white
- Sharp, clean edges with no blurring or shading
- Flat 2D pattern chart (not realistic fabric)
- {style_guidance}"""

TAG_CONTEXT_HEADER = "Traditional pattern inspiration and geometric techniques:"

STYLE_GUIDANCE = {
    "vivid": (
        "Bold color contrast with sharp geometric definition, vibrant reds and deep blues "
        "creating striking diamond and chevron patterns"
    ),
    "natural": (
        "Subtle color variations with traditional folk art styling, authentic handwoven "
        "texture with slight irregularities that add character"
    ),
}

DEFAULT_STYLE = "vivid"

SYSTEM_PROMPTS = {
    "IMAGE_DESCRIPTION": (
        "คุณเป็นนักวิจารณ์ศิลปะผู้เชี่ยวชาญและนักวิเคราะห์ภาพ สร้างคำอธิบายที่น่าสนใจและมีรายละเอียดของภาพที่สร้างขึ้น "
        "ที่จับภาพองค์ประกอบทางภาพ สไตล์ศิลปะ อารมณ์ และผลกระทบเชิงสร้างสรรค์ "
        "เน้นสิ่งที่ทำให้แต่ละภาพมีความเฉพาะตัวและดึงดูดใจสำหรับผู้ชมแกลเลอรี่เชิงสร้างสรรค์ ตอบเป็นภาษาไทยเสมอ"
    ),
    "TAG_GENERATION": (
        "คุณเป็นผู้เชี่ยวชาญการจัดหมวดหมู่เนื้อหาเชิงสร้างสรรค์ สร้างแท็กที่เกี่ยวข้องและค้นหาได้สำหรับภาพตามเนื้อหา "
        "สไตล์ และองค์ประกอบทางศิลปะ ให้แท็กที่กระชับและมีประโยชน์ที่ช่วยให้ผู้ใช้ค้นหาและจัดระเบียบเนื้อหาเชิงสร้างสรรค์ "
        "ตอบเป็นภาษาไทยเสมอ"
    ),
    "PROMPT_ENHANCEMENT": (
        "คุณเป็นวิศวกรพรอมต์เชิงสร้างสรรค์ที่เชี่ยวชาญด้านการสร้างภาพ ปรับปรุงพรอมต์ของผู้ใช้ให้มีความเฉพาะเจาะจงมากขึ้น "
        "มีการบรรยายภาพที่ชัดเจน และเหมาะสมสำหรับการสร้างภาพด้วย AI ในขณะที่ยังคงเจตนาเดิมของผู้ใช้"
    ),
    "GENERAL_ASSISTANT": (
        "คุณเป็นผู้ช่วยที่มีประโยชน์ที่เชี่ยวชาญด้านศิลปะเชิงสร้างสรรค์และการสร้างภาพ "
        "ให้คำตอบที่ชัดเจนและให้ข้อมูลในขณะที่รักษาโทนเสียงที่สร้างสรรค์และสร้างแรงบันดาลใจ ตอบเป็นภาษาไทยเสมอ"
    ),
}

DESCRIPTION_PROMPT_TEMPLATE = """วิเคราะห์ภาพที่สร้างขึ้นนี้และสร้างคำอธิบายที่น่าสนใจสำหรับแกลเลอรี่เชิงสร้างสรรค์

พรอมต์ของผู้ใช้เดิม: "{original_prompt}"
{tag_context}

โปรดให้คำอธิบายที่รวมถึง:
1. องค์ประกอบทางภาพหลักและการจัดวาง
2. สี แสง และอารมณ์ทางศิลปะ
3. สไตล์และเทคนิคที่ใช้
4. วิธีการตอบสนองเจตนาเชิงสร้างสรรค์เดิม
5. สิ่งที่ทำให้ภาพนี้มีความโดดเด่นหรือเฉพาะตัว

ให้คำอธิบายที่น่าสนใจและกระชับ (3-4 ประโยค) เน้นสิ่งที่ทำให้ภาพนี้พิเศษ

**ตอบเป็นภาษาไทยเท่านั้น และให้คำอธิบายที่สมบูรณ์**"""

DESCRIPTION_TAG_CONTEXT_HEADER = "บริบทสไตล์จากแท็กที่เลือก:"

OUTPUT_TAGS_PROMPT_TEMPLATE = """สร้างแท็ก 4-6 ตัวที่เกี่ยวข้องสำหรับภาพเชิงสร้างสรรค์นี้ตามพรอมต์และคำอธิบาย

พรอมต์เดิม: "{original_prompt}"
คำอธิบายที่สร้าง: "{description}"
{existing_tags_context}

สร้างแท็กที่:
- เกี่ยวข้องกับเนื้อหาทางภาพและสไตล์
- มีประโยชน์สำหรับการค้นหาและจัดหมวดหมู่
- กระชับ (1-2 คำในแต่ละแท็ก)
- หลากหลาย (ครอบคลุมหัวข้อ สไตล์ อารมณ์ เทคนิค)
- แตกต่างจากแท็กที่มีอยู่หากเป็นไปได้

รูปแบบ: ส่งคืนเฉพาะแท็กที่คั่นด้วยจุลภาคเท่านั้น ไม่ต้องใส่อย่างอื่น
ตัวอย่าง: "นก, ป่าเขา, ธรรมชาติ, สีเขียว, สงบ, ศิลปะดิจิทัล"

**ตอบเป็นภาษาไทยเท่านั้น และส่งคืนเฉพาะแท็กที่คั่นด้วยจุลภาค**"""

EXISTING_TAGS_HEADER = "แท็กสไตล์ที่มีอยู่:"

DEFAULT_OUTPUT_TAGS = "สร้างสรรค์, ศิลปะ, ดิจิทัล, ปัญญาประดิษฐ์"
