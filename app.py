import gradio as gr

from json_excel_extractor.config import ExportFormat
from json_excel_extractor.handlers import FIELD_HEADERS, extract_handler, upload_message
from json_excel_extractor.log_setup import setup_logging

# --- UI Definition ---
with gr.Blocks(title="JSON to Excel Data Extractor") as demo:
    gr.Markdown("# JSON to Excel Data Extractor")
    gr.Markdown("Upload JSON files, declare the dot paths to pull out, and download one row per file.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Upload")
            file_input = gr.File(label="Upload JSON Files", file_types=[".json"], file_count="multiple")
            upload_msg = gr.Markdown()

            gr.Markdown("### 2. Fields")
            gr.Markdown("One row per column, e.g. `Steps.Params.hook.fileSensor` with alias `File Sensor`.")
            field_table = gr.Dataframe(
                headers=FIELD_HEADERS,
                datatype=["str", "str"],
                col_count=(2, "fixed"),
                row_count=(1, "dynamic"),
                interactive=True,
                label="Field Mapping",
            )

        # Right Panel: Export
        with gr.Column(scale=1):
            gr.Markdown("### 3. Extract")
            output_format = gr.Radio(
                choices=[fmt.value for fmt in ExportFormat],
                value=ExportFormat.XLSX.value,
                label="Output Format",
            )
            extract_btn = gr.Button("Upload and Extract", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)
            download_output = gr.File(label="Download Result")
            preview = gr.JSON(label="Preview (first 3 rows)")

    file_input.change(
        fn=upload_message,
        inputs=[file_input],
        outputs=[upload_msg],
    )

    extract_btn.click(
        fn=extract_handler,
        inputs=[file_input, field_table, output_format],
        outputs=[download_output, status_msg, preview],
    )

if __name__ == "__main__":
    setup_logging()
    demo.launch()
